"""Cart package: models, storage, and engine."""
from .models import EMPTY_CART, CartItem, CartState, line_key
from .service import CartEngine
from .storage import CartStorage, FileCartStorage, MemoryCartStorage, RedisCartStorage

__all__ = [
    "EMPTY_CART",
    "CartItem",
    "CartState",
    "line_key",
    "CartEngine",
    "CartStorage",
    "FileCartStorage",
    "MemoryCartStorage",
    "RedisCartStorage",
]
