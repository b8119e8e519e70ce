"""Structured filtering, sorting and facet accessors for the catalog."""

from typing import Iterable, List, Sequence

from stylematch.domain.entities.filter_option import FilterOption, SortOption
from stylematch.domain.entities.product import Product

FIT_VOCABULARY: tuple[str, ...] = ("oversized", "relaxed", "fitted", "loose")

# Price brackets offered by the filter sheet, inclusive on both ends
PRICE_RANGE_PRESETS: tuple[tuple[float, float], ...] = (
    (0.0, 50.0),
    (50.0, 100.0),
    (100.0, 150.0),
    (150.0, 200.0),
    (200.0, 500.0),
)
DEFAULT_PRICE_RANGE: tuple[float, float] = (0.0, 200.0)


def apply_filters(products: Iterable[Product], filters: Iterable[FilterOption]) -> List[Product]:
    """Narrow products by every active filter.

    Filters are ANDed, so the result does not depend on their order.

    Args:
        products: Products in catalog order
        filters: Active filter predicates

    Returns:
        Products matching all filters, order preserved
    """
    filtered = list(products)
    for option in filters:
        filtered = [product for product in filtered if option.matches(product)]
    return filtered


def apply_sort(products: Iterable[Product], sort_option: SortOption) -> List[Product]:
    """Order products by the selected sort option.

    Relevance leaves the order unchanged: search results are already
    ranked, and without a query the catalog order stands. Newest is also
    a no-op, as the catalog is stored newest first. Price sorts are stable.
    """
    ordered = list(products)
    if sort_option is SortOption.PRICE_LOW_TO_HIGH:
        ordered.sort(key=lambda p: p.price)
    elif sort_option is SortOption.PRICE_HIGH_TO_LOW:
        ordered.sort(key=lambda p: p.price, reverse=True)
    return ordered


def available_brands(products: Iterable[Product]) -> List[str]:
    """Distinct brands, sorted."""
    return sorted({product.brand for product in products})


def available_colors(products: Iterable[Product]) -> List[str]:
    """Distinct colors, sorted."""
    return sorted({color for product in products for color in product.colors})


def available_fits(products: Iterable[Product], vocabulary: Sequence[str] = FIT_VOCABULARY) -> List[str]:
    """Distinct fit tags present in the catalog, sorted."""
    fits = set(vocabulary)
    return sorted({tag for product in products for tag in product.tags if tag in fits})
