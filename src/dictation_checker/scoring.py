"""Scoring and masked-hint generation for dictation attempts."""

import logging
import math
from typing import Dict, NamedTuple, Sequence, Tuple

from .diff import DiffType, TokenDiff, compute_token_diff
from .normalizer import tokenize_for_comparison

logger = logging.getLogger(__name__)

MASK_CHAR = "*"
MIN_MASK_LENGTH = 3


class ComparisonResult(NamedTuple):
    """Outcome of comparing an attempt with its original fragment."""
    score: float
    total_tokens: int
    correct_tokens: int
    feedback: str
    token_diffs: Tuple[TokenDiff, ...]
    is_perfect: bool

    def to_dict(self) -> Dict[str, object]:
        return {
            "score": self.score,
            "totalTokens": self.total_tokens,
            "correctTokens": self.correct_tokens,
            "feedback": self.feedback,
            "tokenDiffs": [diff.to_dict() for diff in self.token_diffs],
            "isPerfect": self.is_perfect,
        }


def generate_masked_hint(
    original_tokens: Sequence[str], token_diffs: Sequence[TokenDiff]
) -> str:
    """Build the masked hint shown to the learner.

    Correctly typed original tokens are shown verbatim; every other
    original token is replaced by an asterisk run of at least three
    characters. Extra tokens in the attempt add nothing.

    Args:
        original_tokens: Tokens of the reference fragment
        token_diffs: Positional diff of original against attempt

    Returns:
        Space-separated hint string
    """
    hint = []
    for index, token in enumerate(original_tokens):
        if index < len(token_diffs) and token_diffs[index].type is DiffType.MATCH:
            hint.append(token)
        else:
            hint.append(MASK_CHAR * max(len(token), MIN_MASK_LENGTH))
    return " ".join(hint)


def compare_texts(original: str, attempt: str) -> ComparisonResult:
    """Compare a learner's attempt with the original fragment.

    Args:
        original: Reference fragment text
        attempt: Text typed by the learner

    Returns:
        ComparisonResult with score, hint and per-token diff
    """
    original_tokens = tokenize_for_comparison(original)
    attempt_tokens = tokenize_for_comparison(attempt)

    token_diffs = compute_token_diff(original_tokens, attempt_tokens)

    correct_tokens = sum(1 for diff in token_diffs if diff.type is DiffType.MATCH)
    total_tokens = max(len(original_tokens), 1)  # Avoid division by zero
    score = correct_tokens / total_tokens
    is_perfect = score == 1 and len(original_tokens) == len(attempt_tokens)

    logger.debug(
        "Compared %d original tokens with %d attempt tokens: %d correct",
        len(original_tokens), len(attempt_tokens), correct_tokens,
    )

    return ComparisonResult(
        score=score,
        total_tokens=total_tokens,
        correct_tokens=correct_tokens,
        feedback=generate_masked_hint(original_tokens, token_diffs),
        token_diffs=token_diffs,
        is_perfect=is_perfect,
    )


def score_percentage(result: ComparisonResult) -> int:
    """Score as a whole percentage, the way it is shown to learners.

    Halves round up, so 5/8 shows as 63%.
    """
    return math.floor(result.score * 100 + 0.5)
