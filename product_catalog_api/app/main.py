"""
Main entrypoint for the Product Catalog API.

This module assembles the FastAPI application: logging, the request
logging middleware, the error translator and the versioned routers.
The ``create_app`` function builds and configures the app, which is
then instantiated at module import time as ``app``, e.g.::

    uvicorn product_catalog_api.app.main:app --reload

Each application owns exactly one ``ProductStore``, kept on
``app.state.product_store`` for the lifetime of the process.
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.errors import register_exception_handlers
from .core.logging_config import RequestLoggingMiddleware, setup_logging
from .services.product_store import ProductStore

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[ProductStore] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use instead of the ones read from the environment.
    store : Optional[ProductStore]
        Store to serve.  When omitted a new store is created, seeded
        with the sample products if ``settings.seed_sample_data`` is set.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings)

    if store is None:
        store = ProductStore.with_sample_data() if settings.seed_sample_data else ProductStore()

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.settings = settings
    app.state.product_store = store

    register_exception_handlers(app)
    app.add_middleware(RequestLoggingMiddleware)

    api_prefix = settings.api_prefix.rstrip("/")
    products_url = f"{api_prefix}/products"

    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    async def welcome() -> str:
        return f"Welcome to the Product API! Go to {products_url} to see all products."

    app.include_router(v1_router, prefix=api_prefix)

    logger.info("%s ready with %d products", settings.project_name, len(store))
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
