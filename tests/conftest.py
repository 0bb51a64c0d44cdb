"""Pytest configuration and fixtures"""
import json
import os
import pytest

# Keep tests off the real data/ directory and out of the checkout delay
os.environ.setdefault("CART_STORAGE", "memory")
os.environ.setdefault("CHECKOUT_PROCESSING_DELAY", "0")

from storefront.cart.service import CartEngine
from storefront.cart.storage import MemoryCartStorage
from storefront.catalog.models import Product
from storefront.catalog.store import CatalogStore


@pytest.fixture
def sample_product_data():
    """Product with two price-bearing dimensions"""
    return {
        "id": "tee-001",
        "name": "Classic Tee",
        "description": "Heavyweight cotton t-shirt",
        "category": "Clothing",
        "basePrice": 20,
        "images": ["/images/tee.jpg"],
        "variants": {
            "color": [
                {"id": "red", "name": "Red", "price": 25, "originalPrice": 35, "inStock": True},
                {"id": "blue", "name": "Blue", "price": 22, "inStock": False},
            ],
            "size": [
                {"id": "m", "name": "Medium", "price": 30, "inStock": True},
                {"id": "l", "name": "Large", "price": 32.5, "inStock": True},
            ],
        },
        "options": [
            {"name": "color", "values": ["red", "blue"]},
            {"name": "size", "values": ["m", "l"]},
        ],
        "rating": 4.5,
        "reviewCount": 12,
        "tags": ["cotton", "basics"],
    }


@pytest.fixture
def sample_product(sample_product_data):
    return Product.model_validate(sample_product_data)


@pytest.fixture
def mug_product():
    """Single-dimension product"""
    return Product.model_validate({
        "id": "mug-001",
        "name": "Ceramic Mug",
        "description": "Stoneware mug",
        "category": "Home",
        "basePrice": 12.5,
        "images": [],
        "variants": {
            "color": [
                {"id": "sand", "name": "Sand", "price": 12.5, "inStock": True},
                {"id": "slate", "name": "Slate", "price": 14, "inStock": True},
            ],
        },
        "options": [{"name": "color", "values": ["sand", "slate"]}],
        "rating": 4.9,
        "reviewCount": 40,
        "tags": ["kitchen"],
    })


@pytest.fixture
def catalog(sample_product, mug_product):
    return CatalogStore([sample_product, mug_product])


@pytest.fixture
def catalog_file(tmp_path, sample_product_data):
    path = tmp_path / "products.json"
    path.write_text(json.dumps([sample_product_data]), encoding="utf-8")
    return path


@pytest.fixture
def memory_storage():
    return MemoryCartStorage()


@pytest.fixture
def engine(memory_storage):
    return CartEngine(memory_storage)
