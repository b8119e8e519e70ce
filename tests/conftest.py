"""Pytest fixtures and configuration for StyleMatch tests."""

import json
import os
import tempfile
from pathlib import Path

# Keep test log files out of the project tree
os.environ.setdefault("STYLEMATCH_LOG_DIR", tempfile.mkdtemp(prefix="stylematch-logs-"))

import pytest

from stylematch.domain.entities import Product
from stylematch.infrastructure import InMemoryPreferenceStore
from stylematch.utils.config import AppConfig, CatalogConfig, PreferencesConfig, reset_config


def make_product(
    product_id: str,
    tags: list[str],
    colors: list[str] | None = None,
    brand: str = "TestBrand",
    price: float = 25.0,
    gender: str = "unisex",
) -> Product:
    """Build a product with sensible defaults for tests."""
    return Product(
        id=product_id,
        name=f"Product {product_id}",
        brand=brand,
        price=price,
        image_name=f"img_{product_id}",
        colors=colors or [],
        tags=tags,
        gender=gender,
    )


@pytest.fixture
def sample_products() -> list[Product]:
    """Small catalog covering every filter dimension."""
    return [
        make_product("p1", ["hoodie", "oversized", "streetwear"], ["black"], brand="Northline", price=68.0),
        make_product("p2", ["tshirt", "relaxed", "casual"], ["white"], brand="Basico", price=22.0),
        make_product("p3", ["shirt", "summer", "casual"], ["green", "white"], brand="Coastal", price=45.0, gender="men"),
        make_product("p4", ["jacket", "denim", "streetwear"], ["blue"], brand="Northline", price=95.0),
        make_product("p5", ["top", "fitted"], ["black"], brand="Maison Lune", price=38.0, gender="women"),
        make_product("p6", ["hoodie", "loose", "casual"], ["grey"], brand="Basico", price=49.0),
    ]


@pytest.fixture
def product_records() -> list[dict]:
    """Raw catalog records as stored in products.json."""
    return [
        {
            "id": "a1",
            "name": "Oversized Hoodie",
            "brand": "Northline",
            "price": 68.0,
            "imageName": "hoodie_black",
            "colors": ["black"],
            "tags": ["hoodie", "oversized"],
            "gender": "unisex",
        },
        {
            "id": "a2",
            "name": "Relaxed Tee",
            "brand": "Basico",
            "price": 22.0,
            "imageName": "tshirt_white",
            "colors": ["white"],
            "tags": ["tshirt", "relaxed"],
            "gender": "Women",
        },
    ]


@pytest.fixture
def catalog_file(tmp_path: Path, product_records) -> Path:
    """Write the raw records to a temporary products.json."""
    path = tmp_path / "products.json"
    path.write_text(json.dumps(product_records), encoding="utf-8")
    return path


@pytest.fixture
def test_config(tmp_path: Path, catalog_file: Path) -> AppConfig:
    """Configuration pointing at temporary catalog and preference files."""
    return AppConfig(
        catalog=CatalogConfig(products_path=str(catalog_file)),
        preferences=PreferencesConfig(
            storage_path=str(tmp_path / "prefs" / "preferences.json"),
            recent_searches_limit=8,
        ),
        log_level="DEBUG",
    )


@pytest.fixture
def product_factory():
    """Expose make_product to tests."""
    return make_product


@pytest.fixture
def preference_store() -> InMemoryPreferenceStore:
    return InMemoryPreferenceStore()


@pytest.fixture(autouse=True)
def _reset_cached_config():
    """Drop any cached configuration between tests."""
    reset_config()
    yield
    reset_config()
