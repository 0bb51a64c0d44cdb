"""Checkout form validation: one required-field check per field."""
from dataclasses import dataclass, field
from typing import Callable, Mapping, Optional

Validator = Callable[[Optional[str]], Optional[str]]


def required(message: str) -> Validator:
    """Validator that fails with `message` on a missing or blank value."""
    def check(value: Optional[str]) -> Optional[str]:
        if value is None or not str(value).strip():
            return message
        return None
    return check


# Display order of the checkout page
FIELD_VALIDATORS: dict[str, Validator] = {
    "email": required("Email is required"),
    "first_name": required("First name is required"),
    "last_name": required("Last name is required"),
    "address": required("Address is required"),
    "city": required("City is required"),
    "state": required("State is required"),
    "zip_code": required("ZIP code is required"),
    "card_number": required("Card number is required"),
    "expiry_date": required("Expiry date is required"),
    "cvv": required("CVV is required"),
    "name_on_card": required("Name on card is required"),
}


@dataclass(frozen=True)
class ValidationResult:
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def validate_field(name: str, value: Optional[str]) -> Optional[str]:
    """Error message for one field, or None when it passes."""
    validator = FIELD_VALIDATORS.get(name)
    return validator(value) if validator else None


def validate_checkout_form(data: Mapping[str, Optional[str]]) -> ValidationResult:
    """Run every field validator and collect the failures by field name."""
    errors = {}
    for name in FIELD_VALIDATORS:
        message = validate_field(name, data.get(name))
        if message:
            errors[name] = message
    return ValidationResult(errors=errors)
