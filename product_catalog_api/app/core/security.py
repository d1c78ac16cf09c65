"""
Shared-secret authentication for mutating routes.

A single API key, configured through ``settings.api_key``, gates every
create, update and delete.  There are no sessions, users or expiry: a
request either carries the exact key in the API key header or it is
rejected with ``AuthenticationError``.  The comparison is byte-for-byte
and runs in constant time.
"""

import hmac
from typing import Optional

from fastapi import Request, Security
from fastapi.security import APIKeyHeader

from .config import settings
from .errors import AuthenticationError

# auto_error=False so a missing header reaches ``verify_api_key`` and is
# reported through the error translator like any other auth failure.
api_key_scheme = APIKeyHeader(name=settings.api_key_header, auto_error=False)


def verify_api_key(candidate: Optional[str], expected: str) -> None:
    """Raise ``AuthenticationError`` unless ``candidate`` equals ``expected``."""
    if not candidate or not expected:
        raise AuthenticationError("Invalid or missing API key")
    if not hmac.compare_digest(candidate.encode("utf-8"), expected.encode("utf-8")):
        raise AuthenticationError("Invalid or missing API key")


async def require_api_key(
    request: Request,
    _documented: Optional[str] = Security(api_key_scheme),
) -> str:
    """Dependency enforcing the API key configured on the running app.

    Both the header name and the expected key come from the settings
    the application was created with, so apps with different keys can
    run side by side.  ``api_key_scheme`` only documents the default
    header in the OpenAPI schema.  Returns the accepted key.
    """
    app_settings = request.app.state.settings
    candidate = request.headers.get(app_settings.api_key_header)
    verify_api_key(candidate, app_settings.api_key)
    return candidate
