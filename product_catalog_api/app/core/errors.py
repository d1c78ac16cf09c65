"""
Error taxonomy and the centralized error translator.

Every failure the service can report belongs to one ``ErrorKind``.
Components raise a ``ProductApiError`` subclass and never build error
responses themselves; the handlers registered by
``register_exception_handlers`` are the only place where an exception
becomes an HTTP response.  All error bodies share one envelope::

    {"error": {"name": ..., "message": ..., "statusCode": ..., "timestamp": ...}}
"""

from __future__ import annotations

import enum
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

DEFAULT_STATUS_CODE = 500
DEFAULT_MESSAGE = "Internal Server Error"
DEFAULT_NAME = "Error"


class ErrorKind(enum.Enum):
    """Failure kinds with their HTTP status codes and envelope names."""

    NOT_FOUND = (404, "NotFoundError")
    VALIDATION = (400, "ValidationError")
    AUTHENTICATION = (401, "AuthenticationError")
    INTERNAL = (500, "InternalError")

    def __init__(self, status_code: int, label: str) -> None:
        self.status_code = status_code
        self.label = label


class ProductApiError(Exception):
    """Base exception for the Product Catalog API.

    Subclasses fix the ``kind``; the message is supplied by the
    raising component and is shown to the client as is.
    """

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def status_code(self) -> int:
        return self.kind.status_code

    @property
    def name(self) -> str:
        return self.kind.label


class NotFoundError(ProductApiError):
    """Raised when a referenced product does not exist."""

    kind = ErrorKind.NOT_FOUND


class ValidationError(ProductApiError):
    """Raised for malformed write payloads and missing search terms."""

    kind = ErrorKind.VALIDATION


class AuthenticationError(ProductApiError):
    """Raised when the API key is missing or incorrect."""

    kind = ErrorKind.AUTHENTICATION


class InternalError(ProductApiError):
    """Raised for unexpected internal failures."""

    kind = ErrorKind.INTERNAL


# =============================================================================
# Translator
# =============================================================================

def error_envelope(
    message: Optional[str] = None,
    status_code: Optional[int] = None,
    name: Optional[str] = None,
) -> Dict[str, Any]:
    """Build the uniform error body, filling in defaults for missing parts."""
    return {
        "error": {
            "name": name or DEFAULT_NAME,
            "message": message or DEFAULT_MESSAGE,
            "statusCode": status_code or DEFAULT_STATUS_CODE,
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        }
    }


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = " -> ".join(str(part) for part in first.get("loc", ()))
    return f"Invalid request: {location}: {first.get('msg', 'invalid value')}"


def translate(exc: Exception, request: Optional[Request] = None) -> Tuple[int, Dict[str, Any]]:
    """Map any exception to ``(status_code, envelope)``.

    Domain errors carry their own kind.  Framework HTTP errors are
    either an unmatched route (404) or another protocol-level failure
    such as 405.  Anything else is an unclassified 500 whose details
    are never exposed.
    """
    if isinstance(exc, ProductApiError):
        return exc.status_code, error_envelope(exc.message, exc.status_code, exc.name)

    if isinstance(exc, RequestValidationError):
        kind = ErrorKind.VALIDATION
        return kind.status_code, error_envelope(
            _describe_validation_error(exc), kind.status_code, kind.label
        )

    if isinstance(exc, StarletteHTTPException):
        if exc.status_code == 404:
            target = "unknown"
            if request is not None:
                target = request.url.path
                if request.url.query:
                    target = f"{target}?{request.url.query}"
            return 404, error_envelope(f"Route {target} not found", 404, "RouteNotFoundError")
        return exc.status_code, error_envelope(str(exc.detail), exc.status_code, "HTTPError")

    return DEFAULT_STATUS_CODE, error_envelope()


# =============================================================================
# Exception Handlers
# =============================================================================

async def product_api_exception_handler(request: Request, exc: ProductApiError) -> JSONResponse:
    """Convert a domain error to its JSON envelope."""
    logger.warning("%s on %s %s: %s", exc.name, request.method, request.url.path, exc.message)
    status_code, body = translate(exc, request)
    return JSONResponse(status_code=status_code, content=body)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Convert framework HTTP errors (unmatched routes, bad methods)."""
    status_code, body = translate(exc, request)
    headers = getattr(exc, "headers", None)
    return JSONResponse(status_code=status_code, content=body, headers=headers)


async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Convert framework request validation errors to a 400 envelope."""
    status_code, body = translate(exc, request)
    return JSONResponse(status_code=status_code, content=body)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last resort: log the traceback and return a generic 500 envelope."""
    logger.exception("Unexpected error on %s %s", request.method, request.url.path)
    status_code, body = translate(exc, request)
    return JSONResponse(status_code=status_code, content=body)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the translator handlers on ``app``."""
    app.add_exception_handler(ProductApiError, product_api_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
