"""Token-level diff between an original fragment and a learner's attempt.

The alignment is purely positional: token ``i`` of the attempt is compared
with token ``i`` of the original, nothing else. A single missing word near
the start therefore shifts every later position into a substitution.
"""

import html
from enum import Enum
from typing import Dict, List, NamedTuple, Sequence, Tuple


class DiffType(str, Enum):
    """Classification of one aligned position."""
    MATCH = "match"
    SUBSTITUTION = "substitution"
    INSERTION = "insertion"
    DELETION = "deletion"


class TokenDiff(NamedTuple):
    """One aligned comparison unit.

    An empty string on either side means the token is absent there.
    """
    original: str
    attempt: str
    is_correct: bool
    type: DiffType

    def to_dict(self) -> Dict[str, object]:
        return {
            "original": self.original,
            "attempt": self.attempt,
            "isCorrect": self.is_correct,
            "type": self.type.value,
        }


def compute_token_diff(
    original_tokens: Sequence[str], attempt_tokens: Sequence[str]
) -> Tuple[TokenDiff, ...]:
    """Compare two token sequences position by position.

    Args:
        original_tokens: Tokens of the reference fragment
        attempt_tokens: Tokens of the learner's attempt

    Returns:
        One TokenDiff per position, ``max(len(original), len(attempt))`` long
    """
    diffs: List[TokenDiff] = []
    max_len = max(len(original_tokens), len(attempt_tokens))

    for i in range(max_len):
        if i >= len(original_tokens):
            diffs.append(TokenDiff("", attempt_tokens[i], False, DiffType.INSERTION))
        elif i >= len(attempt_tokens):
            diffs.append(TokenDiff(original_tokens[i], "", False, DiffType.DELETION))
        elif original_tokens[i] == attempt_tokens[i]:
            diffs.append(TokenDiff(original_tokens[i], attempt_tokens[i], True, DiffType.MATCH))
        else:
            diffs.append(
                TokenDiff(original_tokens[i], attempt_tokens[i], False, DiffType.SUBSTITUTION)
            )

    return tuple(diffs)


def format_diff_html(token_diffs: Sequence[TokenDiff]) -> str:
    """Format diff entries as HTML with highlighting.

    Args:
        token_diffs: Diff entries to render

    Returns:
        HTML string, one space between positions
    """
    html_parts = []

    for entry in token_diffs:
        original = html.escape(entry.original)
        attempt = html.escape(entry.attempt)

        if entry.type is DiffType.MATCH:
            html_parts.append(original)
        elif entry.type is DiffType.SUBSTITUTION:
            html_parts.append(
                f'<del class="wrong">{attempt}</del><ins class="expected">{original}</ins>'
            )
        elif entry.type is DiffType.DELETION:
            html_parts.append(f'<ins class="missing">{original}</ins>')
        else:
            html_parts.append(f'<del class="extra">{attempt}</del>')

    return " ".join(html_parts)


def format_diff_ansi(token_diffs: Sequence[TokenDiff], use_color: bool = True) -> str:
    """Format diff entries with ANSI color codes.

    Substitutions render as ``attempt->original``, missing tokens as
    ``[original]`` and extra tokens as ``+attempt``.

    Args:
        token_diffs: Diff entries to render
        use_color: Whether to use ANSI color codes

    Returns:
        Rendered diff, one space between positions
    """
    RED = "\033[31m"
    YELLOW = "\033[33m"
    RESET = "\033[0m"

    def paint(text: str, color: str) -> str:
        return f"{color}{text}{RESET}" if use_color else text

    parts = []
    for entry in token_diffs:
        if entry.type is DiffType.MATCH:
            parts.append(entry.original)
        elif entry.type is DiffType.SUBSTITUTION:
            parts.append(paint(f"{entry.attempt}->{entry.original}", RED))
        elif entry.type is DiffType.DELETION:
            parts.append(paint(f"[{entry.original}]", YELLOW))
        else:
            parts.append(paint(f"+{entry.attempt}", RED))

    return " ".join(parts)


def get_diff_stats(token_diffs: Sequence[TokenDiff]) -> Dict[str, float]:
    """Get statistics about a token diff.

    Args:
        token_diffs: Diff entries

    Returns:
        Per-type counts, total positions and the share of matching positions
    """
    counts = {diff_type.value: 0 for diff_type in DiffType}
    for entry in token_diffs:
        counts[entry.type.value] += 1

    total = len(token_diffs)
    matches = counts[DiffType.MATCH.value]

    return {
        "total_positions": total,
        "matches": matches,
        "substitutions": counts[DiffType.SUBSTITUTION.value],
        "insertions": counts[DiffType.INSERTION.value],
        "deletions": counts[DiffType.DELETION.value],
        "match_percentage": round((matches / total * 100) if total > 0 else 0, 1),
    }
