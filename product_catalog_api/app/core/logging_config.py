"""
Logging configuration for the Product Catalog API.

``setup_logging`` configures the root logger from ``Settings``: a
console handler plus an optional file handler (``LOG_FILE``), with
``DEBUG=true`` forcing debug output.  ``RequestLoggingMiddleware`` is
installed as the outermost stage of the request pipeline, so every
request is logged, including the ones that fail or match no route.
"""

import logging
import time
from pathlib import Path

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from .config import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

request_logger = logging.getLogger("product_catalog_api.requests")


def resolve_log_level(settings: Settings) -> int:
    """Numeric level for ``settings``; unknown names fall back to INFO."""
    if settings.debug:
        return logging.DEBUG
    return getattr(logging, settings.log_level.upper(), logging.INFO)


def setup_logging(settings: Settings) -> None:
    """Configure the root logger and the request logger.

    Handlers are attached only once; later calls (a second
    ``create_app``, or a test runner that already installed its own
    handlers) just update the request logger's level so each app's
    ``LOG_LEVEL`` still applies to request lines.
    """
    level = resolve_log_level(settings)
    request_logger.setLevel(level)

    root = logging.getLogger()
    if root.handlers:
        return
    root.setLevel(level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if settings.log_file:
        file_handler = logging.FileHandler(Path(settings.log_file).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, URL, status and duration of every request."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start = time.perf_counter()
        url = request.url.path
        if request.url.query:
            url = f"{url}?{request.url.query}"
        try:
            response = await call_next(request)
        except Exception:
            elapsed_ms = (time.perf_counter() - start) * 1000
            request_logger.info("%s %s -> 500 (%.1f ms)", request.method, url, elapsed_ms)
            raise
        elapsed_ms = (time.perf_counter() - start) * 1000
        request_logger.info(
            "%s %s -> %d (%.1f ms)", request.method, url, response.status_code, elapsed_ms
        )
        return response
