"""
SearchResult value object produced by the search engine.
"""

from dataclasses import dataclass
from enum import Enum

from .product import Product


class Confidence(Enum):
    """Qualitative band derived from an integer match score."""

    CLOSE = "Close Match"
    GOOD = "Good Match"
    LOOSE = "Loose Match"


@dataclass(frozen=True)
class SearchResult:
    """
    A scored match for one product.

    Recomputed on every query and never persisted. ``score`` is always at
    least 1 for results emitted by the search engine.
    """

    product: Product
    score: int
    confidence: Confidence
    matched_tags: tuple[str, ...] = ()
    matched_colors: tuple[str, ...] = ()
