"""
Validation gate for product write payloads.

Create and replace requests pass through ``validate_product_payload``
before anything touches the store.  Checks run in a fixed order and
stop at the first failing field: name, description, price, category.
``inStock`` is optional and never checked here; the store coerces it.
"""

import math
from typing import Any

from ..core.errors import ValidationError
from ..schemas.product import ProductDraft


def _is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def _is_non_negative_number(value: Any) -> bool:
    # bool is a subclass of int but is not a JSON number
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        if not math.isfinite(float(value)):
            return False
    except OverflowError:
        # integer literal too large for a float
        return False
    return value >= 0


def validate_product_payload(payload: Any) -> ProductDraft:
    """Check a decoded JSON body and return it as a ``ProductDraft``.

    Raises
    ------
    ValidationError
        If the body is not an object or a required field is missing or
        malformed.  The message names the first failing field.
    """
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")

    if not _is_non_empty_string(payload.get("name")):
        raise ValidationError("Product name is required and must be a non-empty string")

    if not _is_non_empty_string(payload.get("description")):
        raise ValidationError("Product description is required and must be a non-empty string")

    if not _is_non_negative_number(payload.get("price")):
        raise ValidationError("Product price is required and must be a non-negative number")

    if not _is_non_empty_string(payload.get("category")):
        raise ValidationError("Product category is required and must be a non-empty string")

    return ProductDraft(
        name=payload["name"],
        description=payload["description"],
        price=payload["price"],
        category=payload["category"],
        in_stock=payload.get("inStock"),
    )
