"""
Catalog Store

Read-only product list loaded once from the static products.json document,
with the search / category filter / sort used by the catalog page.
"""
import json
from pathlib import Path
from typing import Iterable, Optional

from pydantic import ValidationError

from storefront.errors import CatalogError
from storefront.logging import get_logger

from .models import Product

logger = get_logger(__name__)

CATEGORY_ALL = "all"

SORT_NAME = "name"
SORT_PRICE_LOW = "price-low"
SORT_PRICE_HIGH = "price-high"
SORT_RATING = "rating"
SORT_REVIEWS = "reviews"

SORT_OPTIONS = (SORT_NAME, SORT_PRICE_LOW, SORT_PRICE_HIGH, SORT_RATING, SORT_REVIEWS)


class CatalogStore:
    """
    Immutable, ordered collection of products.

    Usage:
        catalog = CatalogStore.from_file(settings.catalog_path)
        product = catalog.get("wireless-headphones")
        results = catalog.search("audio", sort="price-low")
    """

    def __init__(self, products: Iterable[Product]):
        self._products: tuple[Product, ...] = tuple(products)
        self._by_id = {p.id: p for p in self._products}

    @classmethod
    def from_records(cls, records: list) -> "CatalogStore":
        """Build from already-parsed JSON records."""
        if not isinstance(records, list):
            raise CatalogError("Catalog must be a JSON array of products")
        try:
            return cls(Product.model_validate(record) for record in records)
        except ValidationError as e:
            raise CatalogError(f"Invalid product record: {e}") from e

    @classmethod
    def from_file(cls, path: Path) -> "CatalogStore":
        """
        Load the catalog document.

        Raises:
            CatalogError: If the file is missing, not JSON, or not a product list
        """
        try:
            records = json.loads(Path(path).read_text(encoding="utf-8"))
        except FileNotFoundError as e:
            raise CatalogError(f"Catalog file not found: {path}") from e
        except (OSError, json.JSONDecodeError) as e:
            raise CatalogError(f"Catalog file unreadable: {e}") from e

        catalog = cls.from_records(records)
        logger.info(f"Loaded {len(catalog)} products from {path}")
        return catalog

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self):
        return iter(self._products)

    def all(self) -> list[Product]:
        return list(self._products)

    def get(self, product_id: str) -> Optional[Product]:
        return self._by_id.get(product_id)

    def categories(self) -> list[str]:
        """"all" followed by each distinct category in catalog order."""
        seen: list[str] = []
        for product in self._products:
            if product.category not in seen:
                seen.append(product.category)
        return [CATEGORY_ALL, *seen]

    def search(
        self,
        query: str = "",
        category: str = CATEGORY_ALL,
        sort: str = SORT_NAME,
    ) -> list[Product]:
        """
        Filter and sort the catalog.

        Args:
            query: Case-insensitive match against name, description and tags
            category: Exact category, or "all"
            sort: One of SORT_OPTIONS; unknown values sort by name
        """
        results = list(self._products)

        if query:
            needle = query.lower()
            results = [
                p for p in results
                if needle in p.name.lower()
                or needle in p.description.lower()
                or any(needle in tag.lower() for tag in p.tags)
            ]

        if category and category != CATEGORY_ALL:
            results = [p for p in results if p.category == category]

        if sort == SORT_PRICE_LOW:
            results.sort(key=lambda p: p.price_range()[0])
        elif sort == SORT_PRICE_HIGH:
            results.sort(key=lambda p: p.price_range()[1], reverse=True)
        elif sort == SORT_RATING:
            results.sort(key=lambda p: p.rating, reverse=True)
        elif sort == SORT_REVIEWS:
            results.sort(key=lambda p: p.review_count, reverse=True)
        else:
            results.sort(key=lambda p: p.name.casefold())

        return results
