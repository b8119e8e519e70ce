"""
Tag and color overlap scoring for catalog search.

A candidate product is scored against a set of reference terms by
combining exact overlaps with a fuzzy substring match:

    score = |ref ∩ tags| + |ref ∩ colors| + floor(partial / 2)

where ``partial`` counts, for every reference term, the tags and colors
that contain the term or are contained in it. A term that is a substring
of several tags counts once per tag. Exact overlaps also count as partial
matches, so a single exact hit contributes 1 + 0 and two contribute 2 + 1.
"""

from typing import AbstractSet, Iterable

from stylematch.domain.entities.search_result import Confidence

CLOSE_MATCH_THRESHOLD = 5
GOOD_MATCH_THRESHOLD = 3


def _contains_either_way(term: str, value: str) -> bool:
    return term in value or value in term


def tag_overlap_score(
    ref: AbstractSet[str],
    tags: Iterable[str],
    colors: Iterable[str],
) -> int:
    """Compute the integer relevance score of a candidate.

    Args:
        ref: Lower-cased reference terms
        tags: Candidate style tags, any casing
        colors: Candidate colors, any casing

    Returns:
        Non-negative integer score
    """
    tag_set = {tag.lower() for tag in tags}
    color_set = {color.lower() for color in colors}

    exact = len(ref & tag_set) + len(ref & color_set)

    partial = 0
    for term in ref:
        partial += sum(1 for tag in tag_set if _contains_either_way(term, tag))
        partial += sum(1 for color in color_set if _contains_either_way(term, color))

    # Partial matches count half, always rounded down
    return exact + partial // 2


def confidence_for(score: int) -> Confidence:
    """Map a score to its confidence band.

    5 and above is a close match, 3-4 a good match, anything lower
    (including 0) a loose match.
    """
    if score >= CLOSE_MATCH_THRESHOLD:
        return Confidence.CLOSE
    if score >= GOOD_MATCH_THRESHOLD:
        return Confidence.GOOD
    return Confidence.LOOSE


def matched_values(ref: AbstractSet[str], values: Iterable[str]) -> tuple[str, ...]:
    """Return the values that match any reference term.

    Uses the same bidirectional containment rule as the partial score,
    applied per value. Values keep their original casing and order.
    """
    return tuple(
        value for value in values
        if any(_contains_either_way(term, value.lower()) for term in ref)
    )
