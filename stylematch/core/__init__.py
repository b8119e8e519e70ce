"""Core catalog query engine: tokenizing, scoring, search, filters and state."""

from .catalog_store import CatalogStore, derive_visible_products, derive_visible_results
from .comparison import ComparisonRow, comparison_rows
from .filter_engine import (
    DEFAULT_PRICE_RANGE,
    FIT_VOCABULARY,
    PRICE_RANGE_PRESETS,
    apply_filters,
    apply_sort,
    available_brands,
    available_colors,
    available_fits,
)
from .scoring import confidence_for, tag_overlap_score
from .search_engine import rank_by_reference, related_products, search_by_reference, search_products
from .tokenizer import reference_tags, tokenize

__all__ = [
    "CatalogStore",
    "derive_visible_products",
    "derive_visible_results",
    "ComparisonRow",
    "comparison_rows",
    "DEFAULT_PRICE_RANGE",
    "FIT_VOCABULARY",
    "PRICE_RANGE_PRESETS",
    "apply_filters",
    "apply_sort",
    "available_brands",
    "available_colors",
    "available_fits",
    "confidence_for",
    "tag_overlap_score",
    "rank_by_reference",
    "related_products",
    "search_by_reference",
    "search_products",
    "reference_tags",
    "tokenize",
]
