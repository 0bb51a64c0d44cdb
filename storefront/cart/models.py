"""Cart models with Decimal-based pricing."""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Mapping

from storefront.catalog.models import Product
from storefront.money import multiply, parse_money, to_decimal

LineKey = tuple[str, tuple[tuple[str, str], ...]]


def line_key(product_id: str, selected_variants: Mapping[str, str]) -> LineKey:
    """
    Identity of a cart line.

    The selection is compared as a set of pairs, so {"color": "black",
    "size": "m"} and {"size": "m", "color": "black"} are the same line.
    """
    return product_id, tuple(sorted(selected_variants.items()))


@dataclass(frozen=True)
class CartItem:
    """Single line in the cart. `price` is the unit price frozen when the line was created."""
    product_id: str
    product: Product
    selected_variants: dict[str, str]
    quantity: int
    price: Decimal

    def __post_init__(self):
        object.__setattr__(self, "selected_variants", dict(self.selected_variants))
        object.__setattr__(self, "price", to_decimal(self.price))

    @property
    def key(self) -> LineKey:
        return line_key(self.product_id, self.selected_variants)

    @property
    def line_total(self) -> Decimal:
        """Unit price times quantity."""
        return multiply(self.price, self.quantity)

    def with_quantity(self, quantity: int) -> "CartItem":
        return CartItem(
            product_id=self.product_id,
            product=self.product,
            selected_variants=self.selected_variants,
            quantity=quantity,
            price=self.price,
        )

    def to_dict(self) -> dict:
        """Convert to the persisted JSON shape."""
        return {
            "productId": self.product_id,
            "product": self.product.to_dict(),
            "selectedVariants": dict(self.selected_variants),
            "quantity": self.quantity,
            "price": str(self.price),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CartItem":
        """
        Create from the persisted JSON shape.

        Raises:
            TypeError: If the selection is not an object
            ValueError: If quantity is not an integer or price is not a finite amount
        """
        selected_variants = data.get("selectedVariants", {})
        if not isinstance(selected_variants, dict):
            raise TypeError(f"selectedVariants must be an object, got {type(selected_variants).__name__}")

        quantity = data["quantity"]
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise ValueError(f"quantity must be an integer, got {quantity!r}")

        return cls(
            product_id=str(data["productId"]),
            product=Product.model_validate(data["product"]),
            selected_variants={str(k): str(v) for k, v in selected_variants.items()},
            quantity=quantity,
            price=parse_money(data["price"]),
        )


@dataclass(frozen=True)
class CartState:
    """
    Whole cart. Totals are derived from `items` on every read and are
    never stored separately.
    """
    items: tuple[CartItem, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "items", tuple(self.items))

    @property
    def total(self) -> Decimal:
        """Subtotal: sum of price * quantity over all lines."""
        return sum((item.line_total for item in self.items), Decimal("0"))

    @property
    def item_count(self) -> int:
        """Total number of units in the cart."""
        return sum(item.quantity for item in self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    def find(self, key: LineKey) -> int:
        """Index of the line with this identity, or -1."""
        for index, item in enumerate(self.items):
            if item.key == key:
                return index
        return -1

    def to_dict(self) -> dict:
        """Convert to dictionary for the cart slot."""
        return {
            "items": [item.to_dict() for item in self.items],
            "total": str(self.total),
            "itemCount": self.item_count,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CartState":
        """Create from dictionary. Stored total/itemCount are ignored and recomputed."""
        raw_items = data.get("items", [])
        if not isinstance(raw_items, list) or not all(isinstance(item, dict) for item in raw_items):
            raise TypeError("items must be a list of objects")
        items = [CartItem.from_dict(item) for item in raw_items]
        if any(item.quantity < 1 for item in items):
            raise ValueError("Cart line with non-positive quantity")
        return cls(items=tuple(items))


EMPTY_CART = CartState()
