"""
Top-level router for version 1 of the API.

Aggregates the resource routers under a unified prefix.  The products
router declares its routes relative to ``/products``.
"""

from fastapi import APIRouter

from .endpoints import products

router = APIRouter()

router.include_router(products.router, prefix="/products", tags=["products"])
