"""Tag overlap scoring and confidence banding."""

from .tag_scorer import (
    CLOSE_MATCH_THRESHOLD,
    GOOD_MATCH_THRESHOLD,
    confidence_for,
    matched_values,
    tag_overlap_score,
)

__all__ = [
    "CLOSE_MATCH_THRESHOLD",
    "GOOD_MATCH_THRESHOLD",
    "confidence_for",
    "matched_values",
    "tag_overlap_score",
]
