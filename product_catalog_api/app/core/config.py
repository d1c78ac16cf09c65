"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts without any configuration at all.  In a production
deployment you should at least override ``API_KEY``; the default key
is only meant for local development and demos.
"""

import os
from dataclasses import dataclass
from typing import Optional


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Product Catalog API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Shared secret gating every mutating route.  Clients send it in the
    # header named by ``api_key_header``.
    api_key: str = os.getenv("API_KEY", "demo-api-key-123")
    api_key_header: str = os.getenv("API_KEY_HEADER", "x-api-key")

    # Prefix under which the products resource is mounted, e.g.
    # ``/api/products``.
    api_prefix: str = os.getenv("API_PREFIX", "/api")

    # When enabled, the store starts with the three sample products
    # (Laptop, Smartphone, Coffee Maker).
    seed_sample_data: bool = _env_flag("SEED_SAMPLE_DATA", "true")

    default_page: int = int(os.getenv("DEFAULT_PAGE", "1"))
    default_page_limit: int = int(os.getenv("DEFAULT_PAGE_LIMIT", "10"))

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class definition time, environment variables should
# be set before importing this module.
settings = Settings()
