"""Tests for the pricing resolver"""
from decimal import Decimal

from storefront.catalog.models import Product
from storefront.catalog.pricing import (
    default_selection,
    is_selection_in_stock,
    missing_options,
    resolution_order,
    resolve_price,
)


class TestResolvePrice:
    """Tests for resolve_price."""

    def test_no_selection_uses_base_price(self, sample_product):
        resolved = resolve_price(sample_product, {})

        assert resolved.unit_price == Decimal("20")
        assert resolved.original_price is None

    def test_single_dimension_overrides_base(self, sample_product):
        resolved = resolve_price(sample_product, {"color": "red"})

        assert resolved.unit_price == Decimal("25")
        assert resolved.original_price == Decimal("35")
        assert resolved.is_discounted

    def test_last_option_wins_not_additive(self, sample_product):
        """color=25 then size=30: size is later in option order, so 30."""
        resolved = resolve_price(sample_product, {"color": "red", "size": "m"})

        assert resolved.unit_price == Decimal("30")

    def test_option_order_beats_mapping_order(self, sample_product):
        resolved = resolve_price(sample_product, {"size": "m", "color": "red"})

        assert resolved.unit_price == Decimal("30")
        assert resolution_order(sample_product, {"size": "m", "color": "red"}) == ["color", "size"]

    def test_original_price_kept_from_earlier_dimension(self, sample_product):
        """size 'm' has no originalPrice, so color's stays."""
        resolved = resolve_price(sample_product, {"color": "red", "size": "m"})

        assert resolved.original_price == Decimal("35")
        assert not resolved.is_discounted

    def test_unknown_variant_contributes_nothing(self, sample_product):
        resolved = resolve_price(sample_product, {"color": "red", "size": "xxl"})

        assert resolved.unit_price == Decimal("25")

    def test_unknown_dimension_contributes_nothing(self, sample_product):
        resolved = resolve_price(sample_product, {"material": "wool"})

        assert resolved.unit_price == Decimal("20")

    def test_variant_ids_scoped_to_dimension(self, sample_product):
        """'m' is a size id; looking it up under color finds nothing."""
        resolved = resolve_price(sample_product, {"color": "m"})

        assert resolved.unit_price == Decimal("20")

    def test_unlisted_dimension_resolved_after_options(self):
        product = Product.model_validate({
            "id": "p",
            "basePrice": 10,
            "variants": {
                "color": [{"id": "c", "name": "C", "price": 11, "inStock": True}],
                "bundle": [{"id": "b", "name": "B", "price": 15, "inStock": True}],
            },
            "options": [{"name": "color", "values": ["c"]}],
        })

        resolved = resolve_price(product, {"bundle": "b", "color": "c"})

        assert resolved.unit_price == Decimal("15")


class TestStock:
    """Tests for stock checks and default selection."""

    def test_in_stock_selection(self, sample_product):
        assert is_selection_in_stock(sample_product, {"color": "red", "size": "l"})

    def test_out_of_stock_variant(self, sample_product):
        assert not is_selection_in_stock(sample_product, {"color": "blue", "size": "m"})

    def test_missing_variant_counts_as_out_of_stock(self, sample_product):
        assert not is_selection_in_stock(sample_product, {"color": "green"})

    def test_empty_selection_is_in_stock(self, sample_product):
        assert is_selection_in_stock(sample_product, {})

    def test_default_selection_picks_first_in_stock(self, sample_product):
        assert default_selection(sample_product) == {"color": "red", "size": "m"}

    def test_default_selection_skips_sold_out_option(self):
        product = Product.model_validate({
            "id": "p",
            "basePrice": 5,
            "variants": {
                "color": [{"id": "x", "name": "X", "price": 5, "inStock": False}],
                "size": [
                    {"id": "s", "name": "S", "price": 5, "inStock": False},
                    {"id": "m", "name": "M", "price": 6, "inStock": True},
                ],
            },
            "options": [{"name": "color", "values": ["x"]}, {"name": "size", "values": ["s", "m"]}],
        })

        assert default_selection(product) == {"size": "m"}

    def test_missing_options_lists_unchosen_dimensions(self, sample_product):
        assert missing_options(sample_product, {}) == ["color", "size"]
        assert missing_options(sample_product, {"size": "l"}) == ["color"]
        assert missing_options(sample_product, {"color": "red", "size": "m"}) == []

    def test_missing_options_ignores_sold_out_option(self):
        product = Product.model_validate({
            "id": "p",
            "basePrice": 5,
            "variants": {"color": [{"id": "x", "name": "X", "price": 5, "inStock": False}]},
            "options": [{"name": "color", "values": ["x"]}],
        })

        assert missing_options(product, {}) == []
