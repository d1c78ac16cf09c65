"""
Product endpoints.

Read-only routes (list, search, stats, get by id) are public.  Create,
update and delete are gated: the API key check runs first and the
payload validation gate depends on it, so a request that is both
unauthenticated and invalid is rejected with 401.  Handlers never build
error responses; every failure is raised and turned into the error
envelope by the handlers in ``core.errors``.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, status

from product_catalog_api.app.core.errors import ValidationError
from product_catalog_api.app.core.security import require_api_key
from product_catalog_api.app.schemas.error import ErrorEnvelope
from product_catalog_api.app.schemas.product import (
    Product,
    ProductDraft,
    ProductFilter,
    ProductMessage,
    ProductPage,
    ProductStats,
    ProductWrite,
    SearchResult,
)
from product_catalog_api.app.services.product_store import ProductStore
from product_catalog_api.app.services.query_service import QueryService
from product_catalog_api.app.services.validation import validate_product_payload

router = APIRouter()

_write_body = {
    "requestBody": {
        "required": True,
        "content": {"application/json": {"schema": ProductWrite.model_json_schema()}},
    }
}
_not_found = {404: {"model": ErrorEnvelope, "description": "Product not found"}}
_gated = {
    400: {"model": ErrorEnvelope, "description": "Invalid payload"},
    401: {"model": ErrorEnvelope, "description": "Invalid or missing API key"},
}


def get_product_store(request: Request) -> ProductStore:
    """Return the store owned by the running application."""
    return request.app.state.product_store


def get_query_service(
    request: Request,
    store: ProductStore = Depends(get_product_store),
) -> QueryService:
    app_settings = request.app.state.settings
    return QueryService(
        store,
        default_page=app_settings.default_page,
        default_limit=app_settings.default_page_limit,
    )


async def validated_product(
    request: Request,
    _api_key: str = Depends(require_api_key),
) -> ProductDraft:
    """Validation gate dependency; only runs once the API key is accepted."""
    try:
        payload = await request.json()
    except ValueError:
        raise ValidationError("Request body must be valid JSON") from None
    return validate_product_payload(payload)


@router.get("", response_model=ProductPage)
@router.get("/", response_model=ProductPage, include_in_schema=False)
async def list_products(
    category: Optional[str] = Query(None),
    in_stock: Optional[str] = Query(None, alias="inStock"),
    search: Optional[str] = Query(None),
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    queries: QueryService = Depends(get_query_service),
) -> ProductPage:
    """List products with optional filters and pagination.

    - **category**: case-insensitive exact match.
    - **inStock**: ``true`` selects products in stock, any other value
      selects products out of stock.
    - **search**: case-insensitive substring of name or description.
    - **page**, **limit**: default to 1 and 10; invalid values fall
      back to the defaults.
    """
    filters = ProductFilter(category=category, in_stock=in_stock, search=search)
    return queries.list_products(filters, page=page, limit=limit)


@router.get(
    "/search",
    response_model=SearchResult,
    responses={400: {"model": ErrorEnvelope, "description": "Missing search term"}},
)
async def search_products(
    q: Optional[str] = Query(None),
    queries: QueryService = Depends(get_query_service),
) -> SearchResult:
    """Search name and description without pagination.  ``q`` is required."""
    return queries.search(q)


@router.get("/stats", response_model=ProductStats)
async def product_stats(store: ProductStore = Depends(get_product_store)) -> ProductStats:
    """Counts per stock state and category plus price statistics.

    Price statistics are ``null`` while the catalog is empty.
    """
    return store.stats()


@router.get("/{product_id}", response_model=Product, responses=_not_found)
async def get_product(
    product_id: str,
    store: ProductStore = Depends(get_product_store),
) -> Product:
    return store.get(product_id)


@router.post(
    "",
    response_model=ProductMessage,
    status_code=status.HTTP_201_CREATED,
    responses=_gated,
    openapi_extra=_write_body,
)
@router.post(
    "/",
    response_model=ProductMessage,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
async def create_product(
    draft: ProductDraft = Depends(validated_product),
    store: ProductStore = Depends(get_product_store),
) -> ProductMessage:
    """Create a product (API key required).

    ``inStock`` is optional and defaults to false.
    """
    product = store.insert(draft)
    return ProductMessage(message="Product created successfully", product=product)


@router.put(
    "/{product_id}",
    response_model=ProductMessage,
    responses={**_gated, **_not_found},
    openapi_extra=_write_body,
)
async def update_product(
    product_id: str,
    draft: ProductDraft = Depends(validated_product),
    store: ProductStore = Depends(get_product_store),
) -> ProductMessage:
    """Replace every field of a product (API key required).

    This is a full replacement: an omitted ``inStock`` becomes false.
    """
    product = store.replace(product_id, draft)
    return ProductMessage(message="Product updated successfully", product=product)


@router.delete(
    "/{product_id}",
    response_model=ProductMessage,
    responses={401: _gated[401], **_not_found},
    dependencies=[Depends(require_api_key)],
)
async def delete_product(
    product_id: str,
    store: ProductStore = Depends(get_product_store),
) -> ProductMessage:
    """Delete a product (API key required) and return it."""
    product = store.remove(product_id)
    return ProductMessage(message="Product deleted successfully", product=product)
