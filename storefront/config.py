"""
Storefront settings.

All values come from environment variables so the same build runs locally
(file-backed cart slot) and on a host with Upstash Redis.
"""
import os
from dataclasses import dataclass
from functools import cache
from pathlib import Path
from typing import Optional

BASE_DIR = Path(__file__).resolve().parent.parent

STORAGE_FILE = "file"
STORAGE_REDIS = "redis"
STORAGE_MEMORY = "memory"


def _get_optional_int(name: str) -> Optional[int]:
    value = os.environ.get(name, "").strip()
    return int(value) if value else None


@dataclass(frozen=True)
class Settings:
    catalog_path: Path
    cart_storage: str
    cart_storage_path: Path
    cart_slot: str
    cart_ttl_seconds: Optional[int]
    redis_url: str
    redis_token: str
    checkout_processing_delay: float
    currency: str
    log_level: str = "INFO"


@cache
def get_settings() -> Settings:
    """Read settings from the environment once per process."""
    return Settings(
        catalog_path=Path(os.environ.get("CATALOG_PATH", str(BASE_DIR / "data" / "products.json"))),
        cart_storage=os.environ.get("CART_STORAGE", STORAGE_FILE).lower(),
        cart_storage_path=Path(os.environ.get("CART_STORAGE_PATH", str(BASE_DIR / "data" / "cart.json"))),
        cart_slot=os.environ.get("CART_SLOT", "cart"),
        cart_ttl_seconds=_get_optional_int("CART_TTL_SECONDS"),
        redis_url=os.environ.get("UPSTASH_REDIS_REST_URL", ""),
        redis_token=os.environ.get("UPSTASH_REDIS_REST_TOKEN", ""),
        checkout_processing_delay=float(os.environ.get("CHECKOUT_PROCESSING_DELAY", "2.0")),
        currency=os.environ.get("CURRENCY", "USD"),
        log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    )
