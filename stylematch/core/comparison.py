"""Side-by-side comparison rows for selected products."""

from dataclasses import dataclass
from typing import List, Sequence

from stylematch.domain.entities.product import Product


@dataclass(frozen=True)
class ComparisonRow:
    """One attribute compared across the selected products."""

    title: str
    values: tuple[str, ...]


def comparison_rows(products: Sequence[Product]) -> List[ComparisonRow]:
    """Build the details table for the compared products.

    Args:
        products: Selected products, in selection order

    Returns:
        Rows for price, brand, gender, colors and style tags; empty
        when nothing is selected
    """
    if not products:
        return []
    return [
        ComparisonRow("Price", tuple(f"${p.price:.0f}" for p in products)),
        ComparisonRow("Brand", tuple(p.brand for p in products)),
        ComparisonRow("Gender", tuple(p.gender.value.capitalize() for p in products)),
        ComparisonRow("Colors", tuple(", ".join(p.colors) for p in products)),
        ComparisonRow("Style Tags", tuple(", ".join(p.tags) for p in products)),
    ]
