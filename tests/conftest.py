# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# Fixtures shared by all tests.
#
# Key features:
# - Sets test environment variables before the application is imported
# - Builds a fresh application and store per test so tests never share state
# =============================================================================

import os

# This must happen before importing the config module, which reads the
# environment when it is first imported.
os.environ.setdefault("API_KEY", "test-api-key")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient

from product_catalog_api.app.core.config import Settings
from product_catalog_api.app.main import create_app
from product_catalog_api.app.schemas.product import ProductDraft
from product_catalog_api.app.services.product_store import ProductStore

TEST_API_KEY = "test-api-key"


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def app_settings():
    """Settings with a known API key and sample data enabled."""
    return Settings(api_key=TEST_API_KEY, api_prefix="/api", seed_sample_data=True)


@pytest.fixture
def store():
    """A store seeded with Laptop, Smartphone and Coffee Maker."""
    return ProductStore.with_sample_data()


@pytest.fixture
def empty_store():
    return ProductStore()


@pytest.fixture
def app(app_settings, store):
    return create_app(app_settings, store)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def auth_headers():
    return {"x-api-key": TEST_API_KEY}


@pytest.fixture
def mouse_payload():
    """A valid write payload without ``inStock``."""
    return {
        "name": "Mouse",
        "description": "Wireless mouse",
        "price": 25,
        "category": "electronics",
    }


@pytest.fixture
def make_draft():
    """Factory for drafts that already passed the validation gate."""

    def _make(**overrides):
        fields = {
            "name": "Keyboard",
            "description": "Mechanical keyboard",
            "price": 90,
            "category": "electronics",
            "in_stock": True,
        }
        fields.update(overrides)
        return ProductDraft(**fields)

    return _make
