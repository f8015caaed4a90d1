"""Text normalization and tokenization for answer comparison.

Both functions are pure: the same input always produces the same output,
and no state is shared between calls.

Word characters follow Python's Unicode rules, so accented and non-Latin
letters are kept at token edges (``"café,"`` tokenizes to ``"café"``, not
``"caf"`` as an ASCII-only word class would give).
"""

import logging
import re
from typing import Tuple

logger = logging.getLogger(__name__)

# Curly quote variants folded to their straight ASCII forms
_QUOTE_TABLE = str.maketrans({
    "\u2018": "'",
    "\u2019": "'",
    "\u201c": '"',
    "\u201d": '"',
})

_WHITESPACE_PATTERN = re.compile(r"\s+", re.UNICODE)

# Leading/trailing run of anything that is not a word character or apostrophe
_EDGE_PUNCT_PATTERN = re.compile(r"^[^\w']+|[^\w']+$", re.UNICODE)


def normalize_text(text: str) -> str:
    """Canonicalize text for comparison.

    Lower-cases, trims, straightens curly quotes and collapses whitespace
    runs (including tabs and newlines) to a single space.

    Args:
        text: Raw input text

    Returns:
        Normalized text
    """
    if not text:
        return ""

    normalized = text.lower().strip().translate(_QUOTE_TABLE)
    return _WHITESPACE_PATTERN.sub(" ", normalized)


def _strip_edge_punctuation(piece: str) -> str:
    return _EDGE_PUNCT_PATTERN.sub("", piece)


def tokenize_for_comparison(text: str) -> Tuple[str, ...]:
    """Split text into comparable tokens.

    Edge punctuation is stripped from every piece while internal
    apostrophes are kept, so ``"Don't,"`` becomes ``"don't"``. Pieces
    that end up empty are dropped.

    Args:
        text: Raw input text

    Returns:
        Tokens in reading order (empty for blank input)
    """
    pieces = normalize_text(text).split()

    tokens = []
    for piece in pieces:
        token = _strip_edge_punctuation(piece)
        if token:
            tokens.append(token)

    logger.debug("Tokenized %d pieces into %d tokens", len(pieces), len(tokens))
    return tuple(tokens)
