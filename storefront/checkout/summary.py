"""Order summary: shipping, tax and grand total from a cart subtotal."""
from dataclasses import dataclass
from decimal import Decimal

from storefront.money import Amount, add, format_money, multiply, round_money, subtract, to_decimal, to_float

FREE_SHIPPING_THRESHOLD = Decimal("50")
SHIPPING_FEE = Decimal("9.99")
TAX_RATE = Decimal("0.08")


@dataclass(frozen=True)
class OrderSummary:
    subtotal: Decimal
    shipping: Decimal
    tax: Decimal
    total: Decimal

    @property
    def free_shipping(self) -> bool:
        return self.shipping == 0

    def to_dict(self) -> dict:
        return {
            "subtotal": to_float(round_money(self.subtotal)),
            "shipping": to_float(round_money(self.shipping)),
            "tax": to_float(round_money(self.tax)),
            "total": to_float(round_money(self.total)),
            "free_shipping": self.free_shipping,
        }

    def formatted(self, currency: str = "USD") -> dict:
        return {
            "subtotal": format_money(self.subtotal, currency),
            "shipping": "Free" if self.free_shipping else format_money(self.shipping, currency),
            "tax": format_money(self.tax, currency),
            "total": format_money(self.total, currency),
        }


def summarize(subtotal: Amount) -> OrderSummary:
    """
    Apply the fixed checkout rules.

    Shipping is free strictly above the threshold; tax applies to the
    subtotal only.
    """
    subtotal = to_decimal(subtotal)
    shipping = Decimal("0") if subtotal > FREE_SHIPPING_THRESHOLD else SHIPPING_FEE
    tax = multiply(subtotal, TAX_RATE)
    total = add(add(subtotal, shipping), tax)
    return OrderSummary(subtotal=subtotal, shipping=shipping, tax=tax, total=total)


def free_shipping_remaining(subtotal: Amount) -> Decimal:
    """Amount still needed before shipping becomes free; zero once reached."""
    subtotal = to_decimal(subtotal)
    if subtotal >= FREE_SHIPPING_THRESHOLD:
        return Decimal("0")
    return subtract(FREE_SHIPPING_THRESHOLD, subtotal)
