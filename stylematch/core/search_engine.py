"""
Catalog search engine.

Scores every candidate product against a set of reference terms and
returns ranked results. Ranking is a stable sort on score, so products
with equal scores keep their catalog order.
"""

from typing import AbstractSet, Iterable, List, Sequence, Tuple

from stylematch.domain.entities.product import Product
from stylematch.domain.entities.search_result import SearchResult
from stylematch.utils import get_logger

from .scoring import confidence_for, matched_values, tag_overlap_score
from .tokenizer import tokenize

logger = get_logger(__name__)

DEFAULT_RELATED_LIMIT = 10


def search_products(query: str, products: Iterable[Product]) -> List[SearchResult]:
    """Search products by free text.

    Args:
        query: Free-text query
        products: Candidate products, in catalog order

    Returns:
        Results with score > 0, highest score first. Empty when the
        query has no tokens.
    """
    tokens = tokenize(query)
    if not tokens:
        return []
    return search_by_reference(tokens, products)


def search_by_reference(ref: AbstractSet[str], products: Iterable[Product]) -> List[SearchResult]:
    """Score products against reference terms and drop non-matches.

    Args:
        ref: Lower-cased reference terms
        products: Candidate products

    Returns:
        Ranked results, each with score >= 1
    """
    if not ref:
        return []

    results = []
    for product in products:
        score = tag_overlap_score(ref, product.tags, product.colors)
        if score <= 0:
            continue
        results.append(SearchResult(
            product=product,
            score=score,
            confidence=confidence_for(score),
            matched_tags=matched_values(ref, product.tags),
            matched_colors=matched_values(ref, product.colors),
        ))

    results.sort(key=lambda r: r.score, reverse=True)
    logger.debug(f"Search for {sorted(ref)} matched {len(results)} products")
    return results


def rank_by_reference(
    ref: AbstractSet[str],
    products: Iterable[Product],
) -> List[Tuple[Product, int]]:
    """Rank every product by score, keeping zero-score products last.

    Used for preset and quick-tag result lists, where the whole catalog is
    shown in order of similarity.
    """
    scored = [
        (product, tag_overlap_score(ref, product.tags, product.colors))
        for product in products
    ]
    scored.sort(key=lambda pair: pair[1], reverse=True)
    return scored


def related_products(
    product: Product,
    products: Sequence[Product],
    limit: int = DEFAULT_RELATED_LIMIT,
) -> List[Product]:
    """Find products that share style tags with ``product``.

    Args:
        product: Product being viewed
        products: Whole catalog
        limit: Maximum number of related products

    Returns:
        Up to ``limit`` other products, most similar first
    """
    ref = frozenset(tag.lower() for tag in product.tags)
    others = [candidate for candidate in products if candidate.id != product.id]
    return [candidate for candidate, _ in rank_by_reference(ref, others)[:limit]]
