"""
Common Error Constants

Centralized error messages and the few exceptions the storefront raises.
"""

# Catalog errors
ERROR_PRODUCT_NOT_FOUND = "Product not found"
ERROR_VARIANT_OUT_OF_STOCK = "Selected variant is out of stock"
ERROR_SELECTION_INCOMPLETE = "Please select all product options"

# Cart errors
ERROR_CART_EMPTY = "Cart is empty"
ERROR_INVALID_QUANTITY = "Quantity must be a positive integer"
ERROR_CART_STORAGE = "Cart storage unavailable"

# Checkout errors
ERROR_CHECKOUT_IN_PROGRESS = "Checkout is already being processed"
ERROR_CHECKOUT_INVALID = "Please fill in all required fields"


class StorefrontError(Exception):
    """Base class for storefront failures."""


class CatalogError(StorefrontError):
    """Catalog file is missing or does not describe a product list."""


class CartStorageError(StorefrontError):
    """The cart slot backend could not be written or read."""
