"""
API Pydantic Models

Request bodies shared by the storefront routers.
"""
from typing import Optional
from pydantic import BaseModel


# ==================== CATALOG MODELS ====================

class PriceRequest(BaseModel):
    selected_variants: dict[str, str] = {}


# ==================== CART MODELS ====================

class AddToCartRequest(BaseModel):
    product_id: str
    selected_variants: dict[str, str] = {}
    quantity: int = 1


class UpdateCartItemRequest(BaseModel):
    product_id: str
    selected_variants: dict[str, str] = {}
    quantity: int = 1  # 0 or less removes the line


class RemoveCartItemRequest(BaseModel):
    product_id: str
    selected_variants: dict[str, str] = {}


# ==================== CHECKOUT MODELS ====================

class CheckoutRequest(BaseModel):
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    card_number: Optional[str] = None
    expiry_date: Optional[str] = None
    cvv: Optional[str] = None
    name_on_card: Optional[str] = None
