# Domain Entities Package
"""
Core catalog entities and value objects.
"""

from .filter_option import (
    BrandFilter,
    ColorFilter,
    FilterOption,
    FitFilter,
    GenderFilter,
    PriceRangeFilter,
    SortOption,
)
from .product import Gender, Product
from .search_result import Confidence, SearchResult
from .style_preset import QUICK_TAGS, STYLE_PRESETS, StylePreset, get_preset

__all__ = [
    "BrandFilter",
    "ColorFilter",
    "FilterOption",
    "FitFilter",
    "GenderFilter",
    "PriceRangeFilter",
    "SortOption",
    "Gender",
    "Product",
    "Confidence",
    "SearchResult",
    "QUICK_TAGS",
    "STYLE_PRESETS",
    "StylePreset",
    "get_preset",
]
