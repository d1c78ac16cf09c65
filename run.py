"""Entry point for serving the Product Catalog API.

Starts the FastAPI application with Uvicorn.  Host, port and every
other option are read from environment variables through
``product_catalog_api.app.core.config``; see that module for the full
list (``HOST``, ``PORT``, ``API_KEY``, ``LOG_LEVEL`` ...).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from product_catalog_api.app.core.config import settings
from product_catalog_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info(
        "Server is running on http://%s:%s", settings.host, settings.port
    )
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
