"""
Cart slot storage.

A single named slot holds the full serialized cart. Every save overwrites
it; there is no log and no version field. A slot that is missing or does
not parse is reported as "no saved cart".
"""
import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from pydantic import ValidationError
from upstash_redis import Redis

from storefront.errors import CartStorageError, ERROR_CART_STORAGE
from storefront.logging import get_logger

from .models import CartState

logger = get_logger(__name__)

CART_KEY_PREFIX = "cart:"


def decode_cart(raw: Optional[str], slot: str) -> Optional[CartState]:
    """Parse a slot payload; None when empty or corrupted."""
    if not raw:
        return None
    try:
        data = json.loads(raw)
        if not isinstance(data, dict):
            raise TypeError(f"expected object, got {type(data).__name__}")
        return CartState.from_dict(data)
    except (json.JSONDecodeError, KeyError, TypeError, ValueError, ValidationError) as e:
        logger.warning(f"Corrupted cart data in slot {slot}: {e}")
        return None


def encode_cart(state: CartState) -> str:
    return json.dumps(state.to_dict())


class CartStorage(ABC):
    """Persistence adapter contract used by CartEngine."""

    slot: str

    @abstractmethod
    def load(self) -> Optional[CartState]:
        """Return the saved cart, or None if there is none or it is unreadable."""

    @abstractmethod
    def save(self, state: CartState) -> None:
        """
        Overwrite the slot with `state`.

        Raises:
            CartStorageError: If the backend cannot be written
        """


class MemoryCartStorage(CartStorage):
    """Slot kept in process memory; holds the encoded payload like the real backends."""

    def __init__(self, slot: str = "cart", raw: Optional[str] = None):
        self.slot = slot
        self.raw = raw

    def load(self) -> Optional[CartState]:
        return decode_cart(self.raw, self.slot)

    def save(self, state: CartState) -> None:
        self.raw = encode_cart(state)


class FileCartStorage(CartStorage):
    """Slot stored as a JSON file on the local device."""

    def __init__(self, path: Path):
        self.path = Path(path)
        self.slot = str(self.path)

    def load(self) -> Optional[CartState]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Unreadable cart slot {self.slot}: {e}")
            return None
        return decode_cart(raw, self.slot)

    def save(self, state: CartState) -> None:
        payload = encode_cart(state)
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(payload, encoding="utf-8")
            tmp_path.replace(self.path)
        except OSError as e:
            raise CartStorageError(f"{ERROR_CART_STORAGE}: {e}") from e


class RedisCartStorage(CartStorage):
    """Slot stored under `cart:{slot}` in Upstash Redis."""

    def __init__(self, redis: Redis, slot: str = "cart", ttl: Optional[int] = None):
        self._redis = redis
        self.slot = slot
        self.ttl = ttl

    @property
    def key(self) -> str:
        return f"{CART_KEY_PREFIX}{self.slot}"

    def load(self) -> Optional[CartState]:
        try:
            raw = self._redis.get(self.key)
        except Exception as e:
            # Unreachable Redis at startup is treated like an empty slot
            logger.warning(f"Failed to read cart from Redis: {e}")
            return None
        return decode_cart(raw, self.slot)

    def save(self, state: CartState) -> None:
        try:
            if self.ttl:
                self._redis.set(self.key, encode_cart(state), ex=self.ttl)
            else:
                self._redis.set(self.key, encode_cart(state))
        except Exception as e:
            raise CartStorageError(f"{ERROR_CART_STORAGE}: {e}") from e


def create_redis_client(url: str, token: str) -> Redis:
    """Build an Upstash Redis client from REST credentials."""
    if not url or not token:
        raise ValueError("UPSTASH_REDIS_REST_URL and UPSTASH_REDIS_REST_TOKEN must be set")
    return Redis(url=url, token=token)
