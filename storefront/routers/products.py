"""
Products API Router

Public, read-only catalog endpoints.
"""
from fastapi import APIRouter, Depends, HTTPException

from storefront.catalog.pricing import is_selection_in_stock, missing_options, resolve_price
from storefront.catalog.store import CATEGORY_ALL, SORT_NAME, CatalogStore
from storefront.config import Settings
from storefront.errors import ERROR_PRODUCT_NOT_FOUND
from storefront.money import to_float

from .deps import get_app_settings, get_catalog
from .models import PriceRequest
from .serializers import product_card, product_detail

router = APIRouter(tags=["products"])


@router.get("/api/products")
async def get_products(
    q: str = "",
    category: str = CATEGORY_ALL,
    sort: str = SORT_NAME,
    catalog: CatalogStore = Depends(get_catalog),
    settings: Settings = Depends(get_app_settings),
):
    """Search, filter and sort the catalog."""
    products = catalog.search(query=q, category=category, sort=sort)
    return [product_card(p, settings.currency) for p in products]


@router.get("/api/categories")
async def get_categories(catalog: CatalogStore = Depends(get_catalog)):
    return catalog.categories()


@router.get("/api/products/{product_id}")
async def get_product(
    product_id: str,
    catalog: CatalogStore = Depends(get_catalog),
    settings: Settings = Depends(get_app_settings),
):
    """Product details with the default variant selection."""
    product = catalog.get(product_id)
    if not product:
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)
    return product_detail(product, settings.currency)


@router.post("/api/products/{product_id}/price")
async def get_product_price(
    product_id: str,
    request: PriceRequest,
    catalog: CatalogStore = Depends(get_catalog),
):
    """Price and availability for a variant selection."""
    product = catalog.get(product_id)
    if not product:
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)

    resolved = resolve_price(product, request.selected_variants)
    return {
        "productId": product.id,
        "selectedVariants": request.selected_variants,
        "price": to_float(resolved.unit_price),
        "originalPrice": to_float(resolved.original_price) if resolved.original_price is not None else None,
        "isDiscounted": resolved.is_discounted,
        "inStock": is_selection_in_stock(product, request.selected_variants),
        "missingOptions": missing_options(product, request.selected_variants),
    }
