"""
Query engine: filtered, searched and paginated views of the store.

Nothing here mutates the store.  Filters are applied conjunctively in a
fixed order (category, stock flag, free-text search) to a snapshot of
the store, and the result keeps store order.  Pagination parameters
arrive as raw query-string values; anything that is not a positive
integer silently falls back to the default.
"""

from __future__ import annotations

import math
from typing import List, Optional

from ..core.errors import ValidationError
from ..schemas.product import Product, ProductFilter, ProductPage, SearchResult
from .product_store import ProductStore

DEFAULT_PAGE = 1
DEFAULT_PAGE_LIMIT = 10


def parse_positive_int(value: Optional[str], default: int) -> int:
    """Parse ``value`` as a positive integer, or return ``default``."""
    if value is None:
        return default
    try:
        number = int(str(value).strip())
    except ValueError:
        return default
    return number if number > 0 else default


def _matches_search(product: Product, term: str) -> bool:
    needle = term.lower()
    return needle in product.name.lower() or needle in product.description.lower()


def filter_products(store: ProductStore, filters: Optional[ProductFilter] = None) -> List[Product]:
    """Return the products matching every filter that is present.

    Empty strings count as absent.  ``in_stock`` compares against
    ``value.lower() == "true"``, so any other value selects products
    that are out of stock.
    """
    products = store.list()
    if filters is None:
        return products

    if filters.category:
        category = filters.category.lower()
        products = [p for p in products if p.category.lower() == category]

    if filters.in_stock:
        wanted = filters.in_stock.lower() == "true"
        products = [p for p in products if p.in_stock == wanted]

    if filters.search:
        products = [p for p in products if _matches_search(p, filters.search)]

    return products


class QueryService:
    """Read-only views over a ``ProductStore``."""

    def __init__(
        self,
        store: ProductStore,
        default_page: int = DEFAULT_PAGE,
        default_limit: int = DEFAULT_PAGE_LIMIT,
    ) -> None:
        self.store = store
        self.default_page = default_page
        self.default_limit = default_limit

    def list_products(
        self,
        filters: Optional[ProductFilter] = None,
        page: Optional[str] = None,
        limit: Optional[str] = None,
    ) -> ProductPage:
        """Filter, then slice one page out of the result."""
        matching = filter_products(self.store, filters)
        page_num = parse_positive_int(page, self.default_page)
        limit_num = parse_positive_int(limit, self.default_limit)

        start = (page_num - 1) * limit_num
        end = start + limit_num
        total = len(matching)

        return ProductPage(
            page=page_num,
            limit=limit_num,
            total=total,
            total_pages=math.ceil(total / limit_num),
            has_next=end < total,
            has_prev=page_num > 1,
            data=matching[start:end],
        )

    def search(self, query: Optional[str]) -> SearchResult:
        """Unpaginated name/description search; ``query`` is required."""
        if not query:
            raise ValidationError('Search query parameter "q" is required')
        results = filter_products(self.store, ProductFilter(search=query))
        return SearchResult(query=query, results=results, count=len(results))
