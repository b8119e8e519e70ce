"""
Structured filter predicates and sort options for the catalog.

Each filter variant is a frozen dataclass, so equality is structural and
never crosses variants: ``BrandFilter("x") != ColorFilter("x")``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .product import Product


@dataclass(frozen=True)
class BrandFilter:
    """Keep products whose brand equals ``brand`` exactly."""

    brand: str

    def matches(self, product: Product) -> bool:
        return product.brand == self.brand

    @property
    def label(self) -> str:
        return self.brand


@dataclass(frozen=True)
class PriceRangeFilter:
    """Keep products priced within ``[low, high]``, both ends inclusive.

    An inverted range (``low > high``) matches nothing.
    """

    low: float
    high: float

    def matches(self, product: Product) -> bool:
        return self.low <= product.price <= self.high

    @property
    def label(self) -> str:
        return f"${int(self.low)}-${int(self.high)}"


@dataclass(frozen=True)
class ColorFilter:
    """Keep products listing ``color`` exactly (case-sensitive)."""

    color: str

    def matches(self, product: Product) -> bool:
        return self.color in product.colors

    @property
    def label(self) -> str:
        return self.color


@dataclass(frozen=True)
class FitFilter:
    """Keep products tagged with ``fit`` exactly."""

    fit: str

    def matches(self, product: Product) -> bool:
        return self.fit in product.tags

    @property
    def label(self) -> str:
        return self.fit


@dataclass(frozen=True)
class GenderFilter:
    """Keep products whose gender equals ``gender`` exactly."""

    gender: str

    def matches(self, product: Product) -> bool:
        return product.gender.value == self.gender

    @property
    def label(self) -> str:
        return self.gender


FilterOption = Union[BrandFilter, PriceRangeFilter, ColorFilter, FitFilter, GenderFilter]


class SortOption(Enum):
    """Sort orders offered for the visible product list."""

    RELEVANCE = "relevance"
    PRICE_LOW_TO_HIGH = "price_low_to_high"
    PRICE_HIGH_TO_LOW = "price_high_to_low"
    NEWEST = "newest"

    @property
    def label(self) -> str:
        return _SORT_LABELS[self]


_SORT_LABELS = {
    SortOption.RELEVANCE: "Relevance",
    SortOption.PRICE_LOW_TO_HIGH: "Price: Low to High",
    SortOption.PRICE_HIGH_TO_LOW: "Price: High to Low",
    SortOption.NEWEST: "Newest",
}
