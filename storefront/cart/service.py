"""Cart engine: the four cart mutations over a persisted slot."""
from decimal import Decimal
from typing import Mapping, Optional

from storefront.catalog.models import Product
from storefront.catalog.pricing import resolve_price
from storefront.checkout.summary import OrderSummary, summarize
from storefront.errors import CartStorageError
from storefront.logging import get_logger, log_value

from .models import EMPTY_CART, CartItem, CartState, line_key
from .storage import CartStorage

logger = get_logger(__name__)


class CartEngine:
    """
    Owns the authoritative cart state.

    Every mutation builds a new item tuple, swaps it in as a whole, and
    writes it to the storage slot. Totals are always derived from the items.

    Usage:
        engine = CartEngine(FileCartStorage(path))
        engine.add_to_cart(product, {"color": "black"}, quantity=2)
        engine.update_quantity(product.id, {"color": "black"}, 5)
        engine.clear_cart()
    """

    def __init__(self, storage: Optional[CartStorage] = None):
        self._storage = storage
        self._state: CartState = EMPTY_CART
        self.reload()

    # ==================== READ ====================

    @property
    def state(self) -> CartState:
        return self._state

    @property
    def items(self) -> tuple[CartItem, ...]:
        return self._state.items

    @property
    def total(self) -> Decimal:
        return self._state.total

    @property
    def item_count(self) -> int:
        return self._state.item_count

    @property
    def is_empty(self) -> bool:
        return self._state.is_empty

    def summary(self) -> OrderSummary:
        """Shipping, tax and grand total for the current subtotal."""
        return summarize(self._state.total)

    def reload(self) -> CartState:
        """Replace in-memory state with the slot contents, or the empty cart."""
        loaded = self._storage.load() if self._storage is not None else None
        self._state = loaded if loaded is not None else EMPTY_CART
        if loaded is not None:
            logger.info(f"Restored cart with {loaded.item_count} units in {len(loaded.items)} lines")
        return self._state

    # ==================== MUTATIONS ====================

    def add_to_cart(
        self,
        product: Product,
        selected_variants: Mapping[str, str],
        quantity: int = 1,
    ) -> CartState:
        """
        Add units of a product/selection.

        An existing line with the same selection keeps its frozen price and
        only grows in quantity. Non-positive quantities are ignored.
        """
        if quantity < 1:
            logger.warning(
                f"Ignoring add of {quantity} units of {log_value(product.id)}"
            )
            return self._state

        key = line_key(product.id, selected_variants)
        index = self._state.find(key)
        items = list(self._state.items)

        if index >= 0:
            existing = items[index]
            items[index] = existing.with_quantity(existing.quantity + quantity)
        else:
            price = resolve_price(product, selected_variants).unit_price
            items.append(
                CartItem(
                    product_id=product.id,
                    product=product,
                    selected_variants=dict(selected_variants),
                    quantity=quantity,
                    price=price,
                )
            )

        return self._commit(CartState(items=tuple(items)))

    def remove_from_cart(self, product_id: str, selected_variants: Mapping[str, str]) -> CartState:
        """Drop the matching line. Missing lines are a no-op."""
        key = line_key(product_id, selected_variants)
        items = tuple(item for item in self._state.items if item.key != key)
        if len(items) == len(self._state.items):
            return self._state
        return self._commit(CartState(items=items))

    def update_quantity(
        self,
        product_id: str,
        selected_variants: Mapping[str, str],
        quantity: int,
    ) -> CartState:
        """Set a line's quantity; zero or less removes it."""
        if quantity <= 0:
            return self.remove_from_cart(product_id, selected_variants)

        index = self._state.find(line_key(product_id, selected_variants))
        if index < 0:
            return self._state

        items = list(self._state.items)
        items[index] = items[index].with_quantity(quantity)
        return self._commit(CartState(items=tuple(items)))

    def clear_cart(self) -> CartState:
        """Reset to the empty cart."""
        return self._commit(EMPTY_CART)

    def _commit(self, new_state: CartState) -> CartState:
        self._state = new_state
        if self._storage is None:
            return new_state
        try:
            self._storage.save(new_state)
        except CartStorageError as e:
            logger.error(f"Failed to persist cart to {self._storage.slot}: {e}")
        return new_state
