"""
Enumerations for the line filter data models.

All enums are closed sets - no values outside these sets are permitted.
"""

from enum import Enum


class KeepPolicy(str, Enum):
    """
    Which classification keeps a line.

    YES keeps lines the model answered affirmatively, NO keeps the rest
    (explicit negatives and unrecognized answers alike).
    """

    YES = "yes"
    NO = "no"

    def should_keep(self, classification: bool) -> bool:
        """Map a classification to a keep/drop decision under this policy."""
        return (self is KeepPolicy.YES and classification) or (
            self is KeepPolicy.NO and not classification
        )


class DisplayMode(str, Enum):
    """
    How decisions are written to the output.

    FILTER emits kept lines verbatim and nothing for dropped ones.
    ANNOTATE emits every classified line prefixed with "+" (kept) or "-" (dropped).
    """

    FILTER = "filter"
    ANNOTATE = "annotate"
