"""
Yes/no answer normalization.

Models are not guaranteed to follow the "answer with only yes or no"
instruction, so recognized synonyms are accepted while anything else counts
as a negative answer. Unrecognized answers are never an error.
"""

import structlog

logger = structlog.get_logger(__name__)

AFFIRMATIVE_ANSWERS = frozenset({"yes", "y", "true", "1", "correct", "affirmative"})
NEGATIVE_ANSWERS = frozenset({"no", "n", "false", "0", "incorrect", "negative"})


def normalize_answer(raw: str) -> bool:
    """
    Interpret a raw model answer as a boolean classification.

    Surrounding whitespace is stripped and the text lower-cased, then matched
    exactly (no substring or fuzzy matching) against the recognized sets.

    Examples:
        >>> normalize_answer(" YES \\n")
        True
        >>> normalize_answer("No")
        False
        >>> normalize_answer("I think maybe")
        False
    """
    answer = raw.strip().lower()

    if answer in AFFIRMATIVE_ANSWERS:
        return True
    if answer in NEGATIVE_ANSWERS:
        return False

    logger.debug("Unrecognized answer treated as negative", answer=raw[:80])
    return False
