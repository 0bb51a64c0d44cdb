"""Catalog models - Pydantic schemas for the static product JSON."""
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _float_to_decimal(v):
    # Floats go through their repr so 24.99 stays 24.99
    return Decimal(str(v)) if isinstance(v, float) else v


class _CatalogModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")


class ProductVariant(_CatalogModel):
    """One choice within a dimension (e.g. the "Black" color)."""
    id: str
    name: str
    price: Decimal = Field(allow_inf_nan=False)
    original_price: Optional[Decimal] = Field(default=None, alias="originalPrice", allow_inf_nan=False)
    in_stock: bool = Field(default=True, alias="inStock")
    image: Optional[str] = None

    @field_validator("price", "original_price", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v):
        return _float_to_decimal(v)


class ProductOption(_CatalogModel):
    """A user-selectable dimension, in display order."""
    name: str
    values: list[str] = []


class Product(_CatalogModel):
    """Product record as published in products.json."""
    id: str
    name: str = ""
    description: str = ""
    category: str = ""
    base_price: Decimal = Field(alias="basePrice", allow_inf_nan=False)
    images: list[str] = []
    variants: dict[str, list[ProductVariant]] = {}
    options: list[ProductOption] = []
    rating: float = 0.0
    review_count: int = Field(default=0, alias="reviewCount")
    tags: list[str] = []

    @field_validator("base_price", mode="before")
    @classmethod
    def convert_base_price_to_decimal(cls, v):
        return _float_to_decimal(v)

    def find_variant(self, dimension: str, variant_id: str) -> Optional[ProductVariant]:
        """Look up a variant by id inside one dimension; ids are not global."""
        for variant in self.variants.get(dimension, []):
            if variant.id == variant_id:
                return variant
        return None

    def all_variants(self) -> list[ProductVariant]:
        return [v for choices in self.variants.values() for v in choices]

    def price_range(self) -> tuple[Decimal, Decimal]:
        """Lowest and highest variant price; base price when there are no variants."""
        prices = [v.price for v in self.all_variants()]
        if not prices:
            return self.base_price, self.base_price
        return min(prices), max(prices)

    def has_discount(self) -> bool:
        return any(
            v.original_price is not None and v.original_price > v.price
            for v in self.all_variants()
        )

    def max_original_price(self) -> Optional[Decimal]:
        originals = [v.original_price for v in self.all_variants() if v.original_price is not None]
        return max(originals) if originals else None

    def to_dict(self) -> dict:
        """Serialize back to the catalog JSON shape (camelCase, money as strings)."""
        return self.model_dump(mode="json", by_alias=True)
