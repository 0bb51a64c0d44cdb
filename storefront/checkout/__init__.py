"""Checkout package: order summary rules and form validation."""
from .summary import OrderSummary, free_shipping_remaining, summarize
from .validation import ValidationResult, validate_checkout_form, validate_field

__all__ = [
    "OrderSummary",
    "summarize",
    "free_shipping_remaining",
    "ValidationResult",
    "validate_checkout_form",
    "validate_field",
]
