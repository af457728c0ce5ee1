"""
Unit tests for the JSON logging configuration.
"""

import json
import logging

from BusinessRecordService.settings.logging import (
    APP_LOGGERS,
    SERVICE_NAME,
    CustomJsonFormatter,
    get_logging_config,
)


class TestCustomJsonFormatter:
    """Tests for CustomJsonFormatter."""

    def test_stamps_service_name(self):
        formatter = CustomJsonFormatter("%(name)s %(levelname)s %(message)s")
        record = logging.LogRecord(
            "businesses", logging.INFO, __file__, 1, "Business created", None, None
        )

        payload = json.loads(formatter.format(record))

        assert payload["service"] == SERVICE_NAME
        assert payload["message"] == "Business created"
        assert payload["levelname"] == "INFO"


class TestLoggingConfig:
    """Tests for get_logging_config."""

    def test_app_loggers_use_json_console(self):
        config = get_logging_config("production")

        assert config["formatters"]["json"]["()"] is CustomJsonFormatter
        for name in APP_LOGGERS:
            assert config["loggers"][name]["level"] == "INFO"
            assert config["loggers"][name]["handlers"] == ["console"]

    def test_development_is_verbose(self):
        assert get_logging_config("development")["root"]["level"] == "DEBUG"
