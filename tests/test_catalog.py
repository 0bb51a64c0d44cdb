"""Tests for catalog models and store"""
import json
from decimal import Decimal
from pathlib import Path

import pytest

from storefront.catalog.models import Product
from storefront.catalog.store import CatalogStore
from storefront.errors import CatalogError


class TestProduct:
    """Tests for the Product model."""

    def test_parses_camel_case_fields(self, sample_product):
        assert sample_product.base_price == Decimal("20")
        assert sample_product.review_count == 12
        assert sample_product.variants["size"][1].price == Decimal("32.5")
        assert sample_product.variants["color"][0].original_price == Decimal("35")
        assert sample_product.variants["color"][1].in_stock is False

    def test_float_prices_keep_their_digits(self):
        product = Product.model_validate({"id": "p", "basePrice": 24.99})

        assert product.base_price == Decimal("24.99")

    def test_find_variant(self, sample_product):
        assert sample_product.find_variant("size", "l").name == "Large"
        assert sample_product.find_variant("size", "red") is None
        assert sample_product.find_variant("weight", "l") is None

    def test_price_range(self, sample_product):
        assert sample_product.price_range() == (Decimal("22"), Decimal("32.5"))

    def test_price_range_without_variants(self):
        product = Product.model_validate({"id": "p", "basePrice": 9})

        assert product.price_range() == (Decimal("9"), Decimal("9"))

    def test_discount_flags(self, sample_product, mug_product):
        assert sample_product.has_discount()
        assert sample_product.max_original_price() == Decimal("35")
        assert not mug_product.has_discount()
        assert mug_product.max_original_price() is None

    def test_to_dict_uses_catalog_shape(self, sample_product):
        data = sample_product.to_dict()

        assert data["basePrice"] == "20"
        assert data["reviewCount"] == 12
        assert data["variants"]["color"][0]["originalPrice"] == "35"
        assert Product.model_validate(data) == sample_product


class TestCatalogStore:
    """Tests for CatalogStore."""

    def test_from_file(self, catalog_file):
        catalog = CatalogStore.from_file(catalog_file)

        assert len(catalog) == 1
        assert catalog.get("tee-001").name == "Classic Tee"
        assert catalog.get("missing") is None

    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogError):
            CatalogStore.from_file(tmp_path / "nope.json")

    def test_malformed_file(self, tmp_path):
        path = tmp_path / "products.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(CatalogError):
            CatalogStore.from_file(path)

    def test_not_a_list(self, tmp_path):
        path = tmp_path / "products.json"
        path.write_text(json.dumps({"id": "p"}), encoding="utf-8")

        with pytest.raises(CatalogError):
            CatalogStore.from_file(path)

    def test_invalid_record(self):
        with pytest.raises(CatalogError):
            CatalogStore.from_records([{"name": "no id or price"}])

    @pytest.mark.parametrize("record", [
        {"id": "p", "basePrice": "ten"},
        {"id": "p", "basePrice": "NaN"},
        {"id": "p", "basePrice": None},
        {"id": "p", "basePrice": 5, "variants": {"size": [{"id": "m", "name": "M", "price": "free"}]}},
        {"id": "p", "basePrice": 5, "variants": {"size": [{"id": "m", "name": "M", "price": 6, "originalPrice": "Infinity"}]}},
    ])
    def test_non_numeric_price_is_rejected(self, record, sample_product_data):
        with pytest.raises(CatalogError):
            CatalogStore.from_records([sample_product_data, record])

    def test_categories(self, catalog):
        assert catalog.categories() == ["all", "Clothing", "Home"]

    def test_search_by_name_description_and_tag(self, catalog):
        assert [p.id for p in catalog.search("MUG")] == ["mug-001"]
        assert [p.id for p in catalog.search("heavyweight")] == ["tee-001"]
        assert [p.id for p in catalog.search("kitchen")] == ["mug-001"]
        assert catalog.search("nothing matches") == []

    def test_category_filter(self, catalog):
        assert [p.id for p in catalog.search(category="Home")] == ["mug-001"]
        assert len(catalog.search(category="all")) == 2

    def test_sorting(self, catalog):
        assert [p.id for p in catalog.search(sort="name")] == ["mug-001", "tee-001"]
        # mug min 12.5 < tee min 22
        assert [p.id for p in catalog.search(sort="price-low")] == ["mug-001", "tee-001"]
        # tee max 32.5 > mug max 14
        assert [p.id for p in catalog.search(sort="price-high")] == ["tee-001", "mug-001"]
        assert [p.id for p in catalog.search(sort="rating")] == ["mug-001", "tee-001"]
        assert [p.id for p in catalog.search(sort="reviews")] == ["mug-001", "tee-001"]

    def test_bundled_catalog_loads(self):
        path = Path(__file__).resolve().parent.parent / "data" / "products.json"

        catalog = CatalogStore.from_file(path)

        assert len(catalog) >= 1
