"""Catalog package: product models, store, and pricing resolver."""
from .models import Product, ProductOption, ProductVariant
from .pricing import (
    ResolvedPrice,
    default_selection,
    is_selection_in_stock,
    missing_options,
    resolve_price,
)
from .store import CatalogStore

__all__ = [
    "Product",
    "ProductOption",
    "ProductVariant",
    "ResolvedPrice",
    "CatalogStore",
    "resolve_price",
    "is_selection_in_stock",
    "default_selection",
    "missing_options",
]
