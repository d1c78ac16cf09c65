"""
In-memory record store for products.

``ProductStore`` is the single owner of the product collection.  One
instance is created by the application factory and handed to request
handlers through a dependency; nothing else keeps a second copy of the
data.  The collection lives as long as the process does.

All operations take the store lock.  Records are immutable ``Product``
models, so readers get a shallow copy of the list and can never observe
a half-applied insert, replace or remove.
"""

from __future__ import annotations

import logging
import math
import threading
import uuid
from typing import Any, Callable, Dict, Iterable, List, Optional

from ..core.errors import NotFoundError
from ..schemas.product import PriceStats, Product, ProductDraft, ProductStats

logger = logging.getLogger(__name__)

SAMPLE_PRODUCTS: List[Dict[str, Any]] = [
    {
        "id": "1",
        "name": "Laptop",
        "description": "High-performance laptop with 16GB RAM",
        "price": 1200,
        "category": "electronics",
        "in_stock": True,
    },
    {
        "id": "2",
        "name": "Smartphone",
        "description": "Latest model with 128GB storage",
        "price": 800,
        "category": "electronics",
        "in_stock": True,
    },
    {
        "id": "3",
        "name": "Coffee Maker",
        "description": "Programmable coffee maker with timer",
        "price": 50,
        "category": "kitchen",
        "in_stock": False,
    },
]


def coerce_flag(value: Any) -> bool:
    """Coerce a client-supplied value to a boolean using JSON truthiness.

    ``None``, ``False``, ``0``, ``NaN`` and the empty string are false;
    everything else, including empty lists and objects, is true.
    """
    if value is None or value is False:
        return False
    if isinstance(value, (int, float)):
        return value != 0 and not math.isnan(value)
    if isinstance(value, str):
        return value != ""
    return True


def _normalize(draft: ProductDraft, product_id: str) -> Product:
    return Product(
        id=product_id,
        name=draft.name.strip(),
        description=draft.description.strip(),
        price=draft.price,
        category=draft.category.strip(),
        in_stock=coerce_flag(draft.in_stock),
    )


class ProductStore:
    """Authoritative, lock-guarded holder of product records."""

    def __init__(
        self,
        products: Optional[Iterable[Product]] = None,
        id_factory: Optional[Callable[[], str]] = None,
    ) -> None:
        self._lock = threading.RLock()
        self._products: List[Product] = []
        self._id_factory = id_factory or (lambda: str(uuid.uuid4()))
        if products is not None:
            self.seed(products)

    @classmethod
    def with_sample_data(cls) -> "ProductStore":
        """Return a store holding the three sample products."""
        return cls(Product(**item) for item in SAMPLE_PRODUCTS)

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)

    def seed(self, products: Iterable[Product]) -> None:
        """Append existing records, keeping their ids."""
        with self._lock:
            known = {p.id for p in self._products}
            for product in products:
                if product.id in known:
                    raise ValueError(f"Duplicate product id {product.id!r}")
                known.add(product.id)
                self._products.append(product)

    def clear(self) -> None:
        with self._lock:
            self._products.clear()

    def _index_of(self, product_id: str) -> int:
        for index, product in enumerate(self._products):
            if product.id == product_id:
                return index
        raise NotFoundError(f"Product with ID {product_id} not found")

    def _new_id(self) -> str:
        known = {p.id for p in self._products}
        product_id = self._id_factory()
        while product_id in known:
            product_id = self._id_factory()
        return product_id

    def list(self, predicate: Optional[Callable[[Product], bool]] = None) -> List[Product]:
        """Return matching products in store order.

        The returned list is a snapshot; later mutations of the store
        do not affect it.
        """
        with self._lock:
            snapshot = list(self._products)
        if predicate is None:
            return snapshot
        return [product for product in snapshot if predicate(product)]

    def get(self, product_id: str) -> Product:
        with self._lock:
            return self._products[self._index_of(product_id)]

    def insert(self, draft: ProductDraft) -> Product:
        """Store a normalized copy of ``draft`` under a fresh id."""
        with self._lock:
            product = _normalize(draft, self._new_id())
            self._products.append(product)
        logger.info("Created product %s (%s)", product.id, product.name)
        return product

    def replace(self, product_id: str, draft: ProductDraft) -> Product:
        """Overwrite every mutable field of an existing product.

        The id and the position in store order are kept.
        """
        with self._lock:
            index = self._index_of(product_id)
            product = _normalize(draft, product_id)
            self._products[index] = product
        logger.info("Updated product %s", product_id)
        return product

    def remove(self, product_id: str) -> Product:
        with self._lock:
            product = self._products.pop(self._index_of(product_id))
        logger.info("Deleted product %s", product_id)
        return product

    def stats(self) -> ProductStats:
        """Aggregate counts and price statistics over the current records.

        On an empty store the price statistics are all ``None``.
        """
        products = self.list()
        categories: Dict[str, int] = {}
        for product in products:
            categories[product.category] = categories.get(product.category, 0) + 1
        in_stock = sum(1 for product in products if product.in_stock)

        price_stats = PriceStats()
        if products:
            prices = [product.price for product in products]
            price_stats = PriceStats(
                min=min(prices),
                max=max(prices),
                avg=sum(prices) / len(prices),
            )

        return ProductStats(
            total_products=len(products),
            total_in_stock=in_stock,
            total_out_of_stock=len(products) - in_stock,
            categories=categories,
            price_stats=price_stats,
        )
