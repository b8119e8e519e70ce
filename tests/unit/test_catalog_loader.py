"""Unit tests for static catalog loading."""

import json
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from stylematch.domain.entities import Gender
from stylematch.infrastructure import catalog_loader
from stylematch.infrastructure.catalog_loader import load_catalog
from stylematch.utils.exceptions import CatalogLoadError


class TestLoadCatalog:
    """Test loading and validation of products.json."""

    def test_loads_products(self, catalog_file):
        """Test records become immutable products in file order."""
        products = load_catalog(catalog_file)

        assert [p.id for p in products] == ["a1", "a2"]
        assert products[0].image_name == "hoodie_black"
        assert products[0].tags == ("hoodie", "oversized")
        assert products[1].gender is Gender.WOMEN

    def test_products_are_frozen(self, catalog_file):
        """Test products cannot be mutated after loading."""
        product = load_catalog(catalog_file)[0]
        with pytest.raises(ValidationError):
            product.price = 1.0

    def test_missing_file_degrades_to_empty(self, tmp_path):
        """Test a missing catalog warns and returns no products."""
        with patch.object(catalog_loader.logger, "warning") as warning:
            products = load_catalog(tmp_path / "absent.json")

        assert products == []
        warning.assert_called_once()

    def test_corrupt_json_degrades_to_empty(self, tmp_path):
        """Test invalid JSON warns and returns no products."""
        path = tmp_path / "products.json"
        path.write_text("[{not json", encoding="utf-8")

        with patch.object(catalog_loader.logger, "warning") as warning:
            assert load_catalog(path) == []
        warning.assert_called_once()

    def test_non_list_root_degrades_to_empty(self, tmp_path):
        """Test an object root is rejected."""
        path = tmp_path / "products.json"
        path.write_text(json.dumps({"products": []}), encoding="utf-8")
        assert load_catalog(path) == []

    def test_invalid_record_degrades_to_empty(self, tmp_path, product_records):
        """Test a negative price invalidates the catalog."""
        product_records[1]["price"] = -5
        path = tmp_path / "products.json"
        path.write_text(json.dumps(product_records), encoding="utf-8")
        assert load_catalog(path) == []

    @pytest.mark.parametrize("missing", ["imageName", "colors", "tags"])
    def test_missing_field_degrades_to_empty(self, tmp_path, product_records, missing):
        """Test records without every product field are rejected with a warning."""
        del product_records[0][missing]
        path = tmp_path / "products.json"
        path.write_text(json.dumps(product_records), encoding="utf-8")

        with patch.object(catalog_loader.logger, "warning") as warning:
            assert load_catalog(path) == []
        warning.assert_called_once()

    def test_unknown_gender_rejected(self, tmp_path, product_records):
        """Test gender must be men, women or unisex."""
        product_records[0]["gender"] = "kids"
        path = tmp_path / "products.json"
        path.write_text(json.dumps(product_records), encoding="utf-8")
        with pytest.raises(CatalogLoadError):
            load_catalog(path, strict=True)

    def test_strict_mode_raises(self, tmp_path):
        """Test strict loading surfaces the error with context."""
        with pytest.raises(CatalogLoadError) as exc_info:
            load_catalog(tmp_path / "absent.json", strict=True)
        assert exc_info.value.code == "CATALOG_LOAD"
        assert "absent.json" in exc_info.value.context["path"]

    def test_duplicate_ids_keep_first(self, tmp_path, product_records):
        """Test duplicate ids are dropped with a warning."""
        duplicate = dict(product_records[1], id="a1", name="Duplicate")
        path = tmp_path / "products.json"
        path.write_text(json.dumps(product_records + [duplicate]), encoding="utf-8")

        with patch.object(catalog_loader.logger, "warning") as warning:
            products = load_catalog(path)

        assert [p.name for p in products] == ["Oversized Hoodie", "Relaxed Tee"]
        warning.assert_called_once()

    def test_bundled_catalog_loads(self):
        """Test the shipped data/products.json is valid."""
        from pathlib import Path

        bundled = Path(__file__).parent.parent.parent / "data" / "products.json"
        products = load_catalog(bundled, strict=True)
        assert len(products) > 0
        assert len({p.id for p in products}) == len(products)
