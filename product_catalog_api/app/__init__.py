"""
Application package initializer.

``core`` holds configuration, logging, security and the error
translator; ``services`` the record store and query engine;
``schemas`` the Pydantic models; ``api`` the versioned routers.
"""

from .main import app, create_app  # noqa: F401
