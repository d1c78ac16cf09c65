"""
Pydantic models for product data.

Field names are snake_case in Python and camelCase on the wire
(``in_stock`` is serialized as ``inStock``, ``total_pages`` as
``totalPages`` and so on).  ``Product`` instances are frozen: the store
replaces a record wholesale instead of mutating it, which lets readers
share records without copying them.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Integer prices stay integers on the wire (1200, not 1200.0).  The
# non-negative check lives in the validation gate.
Price = Union[int, float]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProductBase(CamelModel):
    name: str = Field(..., examples=["Laptop"])
    description: str = Field(..., examples=["High-performance laptop with 16GB RAM"])
    price: Price = Field(..., examples=[1200])
    category: str = Field(..., examples=["electronics"])
    in_stock: bool = Field(False, examples=[True])


class ProductWrite(ProductBase):
    """Request body for creating or replacing a product.

    Documentation only: write payloads are checked by the validation
    gate, which reports the first failing field in its own terms.
    """

    in_stock: Optional[bool] = Field(None, examples=[True])


class Product(ProductBase):
    """A stored product as returned by the API."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str = Field(..., examples=["1"])


class ProductDraft(CamelModel):
    """A write payload that passed the validation gate.

    ``in_stock`` keeps the raw client value; the store coerces it to a
    boolean when the draft is persisted.
    """

    name: str
    description: str
    price: Price
    category: str
    in_stock: Any = None


class ProductFilter(CamelModel):
    """Optional filters for listing, as raw query-string values."""

    category: Optional[str] = None
    in_stock: Optional[str] = None
    search: Optional[str] = None


class ProductPage(CamelModel):
    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool
    data: List[Product]


class SearchResult(CamelModel):
    query: str
    results: List[Product]
    count: int


class PriceStats(CamelModel):
    """Price aggregates; all ``None`` when the catalog is empty."""

    min: Optional[Price] = None
    max: Optional[Price] = None
    avg: Optional[float] = None


class ProductStats(CamelModel):
    total_products: int
    total_in_stock: int
    total_out_of_stock: int
    categories: Dict[str, int]
    price_stats: PriceStats


class ProductMessage(CamelModel):
    """Envelope returned by create, update and delete."""

    message: str
    product: Product
