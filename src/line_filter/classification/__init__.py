"""
Classification of single lines.

Components:
- normalize_answer: Raw model text -> bool (unrecognized answers are False)
- Classifier: Prompt -> inference backend -> normalized answer
"""

from line_filter.classification.normalizer import (
    AFFIRMATIVE_ANSWERS,
    NEGATIVE_ANSWERS,
    normalize_answer,
)
from line_filter.classification.classifier import Classifier

__all__ = [
    "AFFIRMATIVE_ANSWERS",
    "NEGATIVE_ANSWERS",
    "normalize_answer",
    "Classifier",
]
