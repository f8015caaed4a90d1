"""Dictation answer checker.

A Python library for scoring a learner's dictation attempt against the
original fragment, with token-level feedback and acceptability checks.
"""

__version__ = "0.1.0"

from .normalizer import normalize_text, tokenize_for_comparison
from .diff import DiffType, TokenDiff, compute_token_diff
from .scoring import ComparisonResult, compare_texts, generate_masked_hint
from .acceptance import is_answer_acceptable

__all__ = [
    "normalize_text",
    "tokenize_for_comparison",
    "DiffType",
    "TokenDiff",
    "compute_token_diff",
    "ComparisonResult",
    "compare_texts",
    "generate_masked_hint",
    "is_answer_acceptable",
    "__version__",
]
