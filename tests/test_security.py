# =============================================================================
# tests/test_security.py - Auth Gate Tests
# =============================================================================

import pytest

from product_catalog_api.app.core.errors import AuthenticationError
from product_catalog_api.app.core.security import verify_api_key


class TestVerifyApiKey:
    def test_matching_key(self):
        verify_api_key("secret", "secret")

    @pytest.mark.parametrize("candidate", [None, "", "Secret", "secret ", "secre"])
    def test_rejected(self, candidate):
        with pytest.raises(AuthenticationError, match="Invalid or missing API key"):
            verify_api_key(candidate, "secret")

    def test_empty_configured_key_rejects_everything(self):
        with pytest.raises(AuthenticationError):
            verify_api_key("", "")

    def test_non_ascii_keys(self):
        verify_api_key("clé", "clé")
        with pytest.raises(AuthenticationError):
            verify_api_key("cle", "clé")
