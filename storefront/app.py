"""
Storefront - FastAPI Application

Composition root: builds the catalog, the cart slot, one cart engine and
one checkout service, and hands them to the routers.
"""
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront.cart.service import CartEngine
from storefront.cart.storage import (
    CartStorage,
    FileCartStorage,
    MemoryCartStorage,
    RedisCartStorage,
    create_redis_client,
)
from storefront.catalog.store import CatalogStore
from storefront.checkout.service import CheckoutService
from storefront.config import STORAGE_MEMORY, STORAGE_REDIS, Settings, get_settings
from storefront.logging import configure_logging, get_logger
from storefront.routers import cart_router, checkout_router, products_router

logger = get_logger(__name__)


def build_cart_storage(settings: Settings) -> CartStorage:
    """Pick the cart slot backend named by CART_STORAGE."""
    if settings.cart_storage == STORAGE_REDIS:
        redis = create_redis_client(settings.redis_url, settings.redis_token)
        return RedisCartStorage(redis, slot=settings.cart_slot, ttl=settings.cart_ttl_seconds)
    if settings.cart_storage == STORAGE_MEMORY:
        return MemoryCartStorage(slot=settings.cart_slot)
    return FileCartStorage(settings.cart_storage_path)


def create_app(
    settings: Optional[Settings] = None,
    catalog: Optional[CatalogStore] = None,
    storage: Optional[CartStorage] = None,
) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    catalog = catalog if catalog is not None else CatalogStore.from_file(settings.catalog_path)
    storage = storage if storage is not None else build_cart_storage(settings)

    cart_engine = CartEngine(storage)
    checkout_service = CheckoutService(cart_engine, processing_delay=settings.checkout_processing_delay)
    logger.info(
        f"Storefront ready: {len(catalog)} products, cart slot {storage.slot} "
        f"({cart_engine.item_count} units)"
    )

    app = FastAPI(title="Storefront API")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.settings = settings
    app.state.catalog = catalog
    app.state.cart_engine = cart_engine
    app.state.checkout_service = checkout_service

    @app.get("/api/health")
    async def health_check():
        return {"status": "ok", "products": len(catalog), "cart_items": cart_engine.item_count}

    app.include_router(products_router)
    app.include_router(cart_router)
    app.include_router(checkout_router)

    return app
