"""
Shared Dependencies for Routers

The composition root stores one catalog, cart engine and checkout service
on app.state; routers receive them through these dependencies.
"""
from fastapi import Request

from storefront.cart.service import CartEngine
from storefront.catalog.store import CatalogStore
from storefront.checkout.service import CheckoutService
from storefront.config import Settings


def get_catalog(request: Request) -> CatalogStore:
    return request.app.state.catalog


def get_cart_engine(request: Request) -> CartEngine:
    return request.app.state.cart_engine


def get_checkout_service(request: Request) -> CheckoutService:
    return request.app.state.checkout_service


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
