"""Static product catalog loading.

The catalog is a JSON array of product records read once at startup.
A missing or corrupt catalog is not fatal: it is logged as a warning and
the app runs with an empty catalog.
"""

import json
from pathlib import Path
from typing import List

from pydantic import ValidationError

from stylematch.domain.entities.product import Product
from stylematch.utils import get_logger, log_execution_time
from stylematch.utils.exceptions import CatalogLoadError

logger = get_logger(__name__)


def _read_catalog(path: Path) -> List[Product]:
    """Parse and validate the catalog file.

    Raises:
        CatalogLoadError: If the file is missing, unreadable or invalid
    """
    if not path.exists():
        raise CatalogLoadError("Catalog file not found", path=str(path))

    try:
        with open(path, 'r', encoding='utf-8') as f:
            records = json.load(f)
    except (OSError, UnicodeDecodeError) as e:
        raise CatalogLoadError("Catalog file unreadable", path=str(path), reason=str(e)) from e
    except json.JSONDecodeError as e:
        raise CatalogLoadError("Invalid JSON in catalog", path=str(path), reason=str(e)) from e

    if not isinstance(records, list):
        raise CatalogLoadError(
            "Catalog root must be a list", path=str(path), reason=type(records).__name__
        )

    products: List[Product] = []
    seen_ids: set[str] = set()
    for index, record in enumerate(records):
        try:
            product = Product.model_validate(record)
        except ValidationError as e:
            raise CatalogLoadError(
                f"Invalid product record at index {index}", path=str(path), reason=str(e)
            ) from e

        if product.id in seen_ids:
            logger.warning(f"Duplicate product id {product.id!r} in catalog, keeping first")
            continue
        seen_ids.add(product.id)
        products.append(product)

    return products


def load_catalog(path: Path | str, strict: bool = False) -> List[Product]:
    """Load the static product catalog.

    Args:
        path: Path to the products JSON file
        strict: Raise instead of degrading to an empty catalog

    Returns:
        Products in file order (newest first by convention)

    Raises:
        CatalogLoadError: Only when ``strict`` is True
    """
    path = Path(path)
    try:
        with log_execution_time(logger, f"catalog load from {path}"):
            products = _read_catalog(path)
    except CatalogLoadError as e:
        if strict:
            raise
        logger.warning(f"Failed to load products, continuing with an empty catalog: {e}")
        return []

    logger.info(f"Loaded {len(products)} products from {path}")
    return products
