"""
Money Utilities - Decimal operations for catalog and cart amounts.

Catalog prices arrive as JSON numbers; they are converted via their string
form so 24.99 stays 24.99 and sums never drift.
"""
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Union

Amount = Union[str, int, float, Decimal, None]

MONEY_PRECISION = Decimal("0.01")

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
}


def to_decimal(value: Amount) -> Decimal:
    """
    Convert any value to Decimal safely.

    Args:
        value: Value to convert (str, int, float, Decimal, or None)

    Returns:
        Decimal representation of the value, or Decimal("0") if None/invalid
    """
    if value is None:
        return Decimal("0")

    if isinstance(value, Decimal):
        return value

    try:
        if isinstance(value, float):
            return Decimal(str(value))
        return Decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return Decimal("0")


def parse_money(value: Amount) -> Decimal:
    """
    Parse a stored amount strictly.

    Unlike to_decimal, nothing is coerced to zero: booleans, None, text
    that is not a number, and NaN/Infinity all raise.

    Raises:
        ValueError: If the value is not a finite number
    """
    if isinstance(value, bool) or not isinstance(value, (str, int, float, Decimal)):
        raise ValueError(f"Not a monetary amount: {value!r}")
    try:
        amount = Decimal(str(value))
    except InvalidOperation as e:
        raise ValueError(f"Not a monetary amount: {value!r}") from e
    if not amount.is_finite():
        raise ValueError(f"Non-finite monetary amount: {value!r}")
    return amount


def round_money(value: Amount) -> Decimal:
    """Round a monetary value to cents, half up."""
    return to_decimal(value).quantize(MONEY_PRECISION, rounding=ROUND_HALF_UP)


def format_money(value: Amount, currency: str = "USD") -> str:
    """
    Format monetary value for display.

    Args:
        value: Value to format
        currency: Currency code (USD, EUR, GBP, ...)

    Returns:
        "$53.19" style string for known symbols, "53.19 CHF" otherwise
    """
    formatted = f"{round_money(value):,.2f}"
    symbol = CURRENCY_SYMBOLS.get(currency)
    if symbol:
        return f"{symbol}{formatted}"
    return f"{formatted} {currency}"


def to_float(value: Amount) -> float:
    """
    Convert Decimal to float for JSON responses.

    Use only at API boundaries, not for internal calculations.
    """
    return float(to_decimal(value))


def add(a: Amount, b: Amount) -> Decimal:
    """Safe addition of monetary values."""
    return to_decimal(a) + to_decimal(b)


def subtract(a: Amount, b: Amount) -> Decimal:
    """Safe subtraction of monetary values."""
    return to_decimal(a) - to_decimal(b)


def multiply(value: Amount, factor: Amount) -> Decimal:
    """Safe multiplication of monetary value by a factor."""
    return to_decimal(value) * to_decimal(factor)
