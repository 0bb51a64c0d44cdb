"""
Checkout Service

Simulated order placement: validates the form, waits out a fake
processing delay, then clears the cart. Nothing is charged or stored.
"""
import asyncio
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Mapping, Optional

from storefront.cart.models import CartItem
from storefront.cart.service import CartEngine
from storefront.errors import ERROR_CART_EMPTY, ERROR_CHECKOUT_IN_PROGRESS, ERROR_CHECKOUT_INVALID
from storefront.logging import get_logger, mask_email

from .summary import OrderSummary
from .validation import validate_checkout_form

logger = get_logger(__name__)


@dataclass(frozen=True)
class OrderConfirmation:
    order_id: str
    email: str
    items: tuple[CartItem, ...]
    summary: OrderSummary
    placed_at: str


@dataclass(frozen=True)
class CheckoutResult:
    success: bool
    confirmation: Optional[OrderConfirmation] = None
    error: Optional[str] = None
    field_errors: dict[str, str] = field(default_factory=dict)


class CheckoutService:
    """
    Places simulated orders against a CartEngine.

    Only one submission runs at a time; a second one is refused while the
    first is waiting out the processing delay.
    """

    def __init__(self, engine: CartEngine, processing_delay: float = 2.0):
        self._engine = engine
        self._processing_delay = processing_delay
        self._processing = False

    @property
    def is_processing(self) -> bool:
        return self._processing

    async def submit(self, form: Mapping[str, Optional[str]]) -> CheckoutResult:
        if self._processing:
            return CheckoutResult(success=False, error=ERROR_CHECKOUT_IN_PROGRESS)

        if self._engine.is_empty:
            return CheckoutResult(success=False, error=ERROR_CART_EMPTY)

        validation = validate_checkout_form(form)
        if not validation.is_valid:
            return CheckoutResult(
                success=False,
                error=ERROR_CHECKOUT_INVALID,
                field_errors=validation.errors,
            )

        self._processing = True
        try:
            items = self._engine.items
            summary = self._engine.summary()

            await asyncio.sleep(self._processing_delay)

            self._engine.clear_cart()
        finally:
            self._processing = False

        confirmation = OrderConfirmation(
            order_id=uuid.uuid4().hex[:12].upper(),
            email=str(form.get("email")).strip(),
            items=items,
            summary=summary,
            placed_at=datetime.now(timezone.utc).isoformat(),
        )
        logger.info(
            f"Order {confirmation.order_id} placed for "
            f"{mask_email(confirmation.email)}: "
            f"{len(items)} lines, total {summary.total}"
        )
        return CheckoutResult(success=True, confirmation=confirmation)
