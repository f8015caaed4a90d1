"""Acceptability policy: decides whether an attempt lets the learner advance."""

from .scoring import ComparisonResult

# Tolerance applies only to originals of at least this many tokens
TOLERANCE_MIN_TOKENS = 8
TOLERANCE_MAX_ERRORS = 1


def is_answer_acceptable(result: ComparisonResult, tolerance_mode: bool = False) -> bool:
    """Check if an answer is acceptable.

    A perfect answer is always accepted. With ``tolerance_mode`` a single
    wrong, missing or extra token is forgiven on long fragments; otherwise
    nothing short of a perfect match passes.

    Args:
        result: Comparison result for the attempt
        tolerance_mode: Allow one error on long fragments

    Returns:
        True if the learner may advance
    """
    if result.is_perfect:
        return True

    if tolerance_mode and result.total_tokens >= TOLERANCE_MIN_TOKENS:
        return result.total_tokens - result.correct_tokens <= TOLERANCE_MAX_ERRORS

    return False
