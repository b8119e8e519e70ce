"""
Session-scoped catalog state and the derived visible-products view.

The store owns the mutable user state (saved ids, recent searches, active
filters, sort, query, quick-tag selection, comparison selection). The
visible list is never cached: ``derive_visible_products`` is a pure
function recomputed on every read.

Usage:
    >>> store = CatalogStore.from_config(get_config())
    >>> store.set_query("black hoodie")
    >>> store.apply_filter(PriceRangeFilter(0, 50))
    >>> store.visible_products()
"""

from typing import Iterable, List, Optional, Sequence

from stylematch.domain.entities.filter_option import FilterOption, SortOption
from stylematch.domain.entities.product import Product
from stylematch.domain.entities.search_result import SearchResult
from stylematch.domain.interfaces import PreferenceStoreInterface
from stylematch.infrastructure.catalog_loader import load_catalog
from stylematch.infrastructure.preference_store import InMemoryPreferenceStore, JsonPreferenceStore
from stylematch.utils import get_logger, set_package_log_level
from stylematch.utils.config import AppConfig

from .comparison import ComparisonRow, comparison_rows
from .filter_engine import (
    FIT_VOCABULARY,
    apply_filters,
    apply_sort,
    available_brands,
    available_colors,
    available_fits,
)
from .search_engine import DEFAULT_RELATED_LIMIT, related_products, search_by_reference
from .tokenizer import reference_tags

logger = get_logger(__name__)

MAX_RECENT_SEARCHES = 8
MAX_COMPARISON_ITEMS = 2


def derive_visible_results(
    products: Sequence[Product],
    filters: Iterable[FilterOption],
    query: str = "",
    selected_tags: Iterable[str] = (),
) -> List[SearchResult]:
    """Filter products, then score them against the active reference tags.

    Returns an empty list when neither a query nor tags are active.
    """
    ref = reference_tags(query, selected_tags)
    if not ref:
        return []
    return search_by_reference(ref, apply_filters(products, filters))


def derive_visible_products(
    products: Sequence[Product],
    filters: Iterable[FilterOption],
    query: str = "",
    sort_option: SortOption = SortOption.RELEVANCE,
    selected_tags: Iterable[str] = (),
) -> List[Product]:
    """Compose filters, search and sort into the visible product list.

    Args:
        products: Raw catalog
        filters: Active filters, ANDed
        query: Free-text query; empty means no search
        sort_option: Applied last; relevance keeps the search ranking
        selected_tags: Quick tags added to the query's reference terms

    Returns:
        Products to display
    """
    visible = apply_filters(products, filters)
    ref = reference_tags(query, selected_tags)
    if ref:
        visible = [result.product for result in search_by_reference(ref, visible)]
    elif query:
        # Query with no searchable terms: nothing can match
        visible = []
    return apply_sort(visible, sort_option)


class CatalogStore:
    """
    Single-owner catalog state.

    Preference lists are read from ``preference_store`` at construction
    and written back on every mutation.
    """

    def __init__(
        self,
        products: Sequence[Product],
        preference_store: Optional[PreferenceStoreInterface] = None,
        recent_limit: int = MAX_RECENT_SEARCHES,
        fit_vocabulary: Sequence[str] = FIT_VOCABULARY,
        related_limit: int = DEFAULT_RELATED_LIMIT,
    ):
        self.products: List[Product] = list(products)
        self.preference_store = preference_store or InMemoryPreferenceStore()
        self.recent_limit = recent_limit
        self.fit_vocabulary = tuple(fit_vocabulary)
        self.related_limit = related_limit

        self.saved: set[str] = self.preference_store.load_saved()
        self.recent_searches: List[str] = self.preference_store.load_recent()[:recent_limit]
        self.active_filters: List[FilterOption] = []
        self.selected_sort: SortOption = SortOption.RELEVANCE
        self.search_query: str = ""
        self.selected_tags: set[str] = set()
        self.comparison: List[Product] = []

        logger.debug(
            f"CatalogStore ready: {len(self.products)} products, "
            f"{len(self.saved)} saved, {len(self.recent_searches)} recent searches"
        )

    @classmethod
    def from_config(cls, config: AppConfig) -> "CatalogStore":
        """Build a store from configuration, loading the catalog from disk."""
        set_package_log_level(config.log_level)
        products = load_catalog(config.catalog.products_path)
        return cls(
            products,
            preference_store=JsonPreferenceStore(config.preferences.storage_path),
            recent_limit=config.preferences.recent_searches_limit,
            fit_vocabulary=config.search.fit_vocabulary,
            related_limit=config.search.related_limit,
        )

    # =========================================
    # Saved items
    # =========================================

    def toggle_saved(self, product_id: str) -> None:
        if product_id in self.saved:
            self.saved.remove(product_id)
        else:
            self.saved.add(product_id)
        self.preference_store.save_saved(set(self.saved))

    def is_saved(self, product_id: str) -> bool:
        return product_id in self.saved

    def saved_products(self) -> List[Product]:
        """Saved products in catalog order."""
        return [product for product in self.products if product.id in self.saved]

    # =========================================
    # Comparison
    # =========================================

    def add_to_comparison(self, product: Product) -> None:
        """Select a product for comparison; full or duplicate adds are ignored."""
        if len(self.comparison) >= MAX_COMPARISON_ITEMS:
            return
        if self.is_in_comparison(product):
            return
        self.comparison.append(product)

    def remove_from_comparison(self, product: Product) -> None:
        self.comparison = [item for item in self.comparison if item.id != product.id]

    def clear_comparison(self) -> None:
        self.comparison = []

    def is_in_comparison(self, product: Product) -> bool:
        return any(item.id == product.id for item in self.comparison)

    def comparison_rows(self) -> List[ComparisonRow]:
        return comparison_rows(self.comparison)

    # =========================================
    # Recent searches
    # =========================================

    def add_recent_search(self, text: str) -> None:
        """Record a search, newest first, de-duplicated ignoring case."""
        search = text.strip()
        if not search:
            return
        lowered = search.casefold()
        self.recent_searches = [s for s in self.recent_searches if s.casefold() != lowered]
        self.recent_searches.insert(0, search)
        del self.recent_searches[self.recent_limit:]
        self.preference_store.save_recent(list(self.recent_searches))

    def clear_recent_searches(self) -> None:
        self.recent_searches = []
        self.preference_store.save_recent([])

    # =========================================
    # Filters, query and sort
    # =========================================

    def apply_filter(self, option: FilterOption) -> None:
        self.active_filters.append(option)

    def remove_filter(self, option: FilterOption) -> None:
        """Remove every active filter equal to ``option``."""
        self.active_filters = [f for f in self.active_filters if f != option]

    def clear_all_filters(self) -> None:
        self.active_filters = []

    def set_query(self, text: str) -> None:
        self.search_query = text

    def toggle_tag(self, tag: str) -> None:
        """Toggle a quick tag in the reference selection."""
        key = tag.strip().lower()
        if not key:
            return
        if key in self.selected_tags:
            self.selected_tags.remove(key)
        else:
            self.selected_tags.add(key)

    def clear_tags(self) -> None:
        self.selected_tags = set()

    def set_sort(self, option: SortOption) -> None:
        self.selected_sort = option

    # =========================================
    # Derived views
    # =========================================

    def visible_products(self) -> List[Product]:
        return derive_visible_products(
            self.products,
            self.active_filters,
            self.search_query,
            self.selected_sort,
            self.selected_tags,
        )

    def visible_results(self) -> List[SearchResult]:
        """Scored results for the current query and tags, ignoring sort."""
        return derive_visible_results(
            self.products, self.active_filters, self.search_query, self.selected_tags
        )

    def related_to(self, product: Product) -> List[Product]:
        return related_products(product, self.products, limit=self.related_limit)

    @property
    def available_brands(self) -> List[str]:
        return available_brands(self.products)

    @property
    def available_colors(self) -> List[str]:
        return available_colors(self.products)

    @property
    def available_fits(self) -> List[str]:
        return available_fits(self.products, self.fit_vocabulary)
