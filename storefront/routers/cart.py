"""
Cart Router

The cart engine is synchronous; every endpoint returns the full cart
payload after the mutation so the client never assembles totals itself.
"""
from fastapi import APIRouter, Depends, HTTPException

from storefront.cart.service import CartEngine
from storefront.catalog.pricing import is_selection_in_stock, missing_options
from storefront.catalog.store import CatalogStore
from storefront.config import Settings
from storefront.errors import (
    ERROR_INVALID_QUANTITY,
    ERROR_PRODUCT_NOT_FOUND,
    ERROR_SELECTION_INCOMPLETE,
    ERROR_VARIANT_OUT_OF_STOCK,
)
from storefront.logging import get_logger, log_value

from .deps import get_app_settings, get_cart_engine, get_catalog
from .models import AddToCartRequest, RemoveCartItemRequest, UpdateCartItemRequest
from .serializers import cart_response

logger = get_logger(__name__)

router = APIRouter(tags=["cart"])


@router.get("/api/cart")
async def get_cart(
    engine: CartEngine = Depends(get_cart_engine),
    settings: Settings = Depends(get_app_settings),
):
    return cart_response(engine.state, settings.currency)


@router.post("/api/cart/items")
async def add_to_cart(
    request: AddToCartRequest,
    engine: CartEngine = Depends(get_cart_engine),
    catalog: CatalogStore = Depends(get_catalog),
    settings: Settings = Depends(get_app_settings),
):
    """Add units of a product selection; repeated selections merge."""
    product = catalog.get(request.product_id)
    if not product:
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)
    if request.quantity < 1:
        raise HTTPException(status_code=400, detail=ERROR_INVALID_QUANTITY)
    if not is_selection_in_stock(product, request.selected_variants):
        raise HTTPException(status_code=400, detail=ERROR_VARIANT_OUT_OF_STOCK)
    missing = missing_options(product, request.selected_variants)
    if missing:
        raise HTTPException(
            status_code=400,
            detail={"message": ERROR_SELECTION_INCOMPLETE, "missingOptions": missing},
        )

    state = engine.add_to_cart(product, request.selected_variants, request.quantity)
    logger.info(
        f"Added {request.quantity} x {log_value(product.id)}; "
        f"cart now {state.item_count} units"
    )
    return cart_response(state, settings.currency)


@router.patch("/api/cart/items")
async def update_cart_item(
    request: UpdateCartItemRequest,
    engine: CartEngine = Depends(get_cart_engine),
    settings: Settings = Depends(get_app_settings),
):
    """Set a line's quantity (0 or less removes it)."""
    state = engine.update_quantity(request.product_id, request.selected_variants, request.quantity)
    return cart_response(state, settings.currency)


@router.delete("/api/cart/items")
async def remove_cart_item(
    request: RemoveCartItemRequest,
    engine: CartEngine = Depends(get_cart_engine),
    settings: Settings = Depends(get_app_settings),
):
    state = engine.remove_from_cart(request.product_id, request.selected_variants)
    return cart_response(state, settings.currency)


@router.delete("/api/cart")
async def clear_cart(
    engine: CartEngine = Depends(get_cart_engine),
    settings: Settings = Depends(get_app_settings),
):
    state = engine.clear_cart()
    return cart_response(state, settings.currency)
