"""
Checkout Router

Simulated order placement. Validation failures come back per field so the
form can show each message next to its input.
"""
from fastapi import APIRouter, Depends, HTTPException

from storefront.checkout.service import CheckoutService
from storefront.config import Settings
from storefront.errors import ERROR_CHECKOUT_IN_PROGRESS

from .deps import get_app_settings, get_checkout_service
from .models import CheckoutRequest
from .serializers import cart_item

router = APIRouter(tags=["checkout"])


@router.post("/api/checkout")
async def checkout(
    request: CheckoutRequest,
    service: CheckoutService = Depends(get_checkout_service),
    settings: Settings = Depends(get_app_settings),
):
    result = await service.submit(request.model_dump())

    if not result.success:
        status = 409 if result.error == ERROR_CHECKOUT_IN_PROGRESS else 400
        raise HTTPException(
            status_code=status,
            detail={"message": result.error, "errors": result.field_errors},
        )

    confirmation = result.confirmation
    return {
        "orderId": confirmation.order_id,
        "email": confirmation.email,
        "placedAt": confirmation.placed_at,
        "items": [cart_item(item, settings.currency) for item in confirmation.items],
        "summary": confirmation.summary.to_dict(),
        "summaryDisplay": confirmation.summary.formatted(settings.currency),
    }
