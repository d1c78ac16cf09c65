# =============================================================================
# tests/test_logging_config.py - Logging Setup Tests
# =============================================================================

import logging

from product_catalog_api.app.core.config import Settings
from product_catalog_api.app.core.logging_config import (
    request_logger,
    resolve_log_level,
    setup_logging,
)


class TestResolveLogLevel:
    def test_named_level(self):
        assert resolve_log_level(Settings(log_level="warning")) == logging.WARNING

    def test_unknown_level_falls_back_to_info(self):
        assert resolve_log_level(Settings(log_level="chatty")) == logging.INFO

    def test_debug_flag_wins(self):
        assert resolve_log_level(Settings(debug=True, log_level="ERROR")) == logging.DEBUG


class TestSetupLogging:
    def test_request_logger_follows_each_app(self):
        setup_logging(Settings(log_level="DEBUG"))
        assert request_logger.level == logging.DEBUG
        setup_logging(Settings(log_level="WARNING"))
        assert request_logger.level == logging.WARNING
