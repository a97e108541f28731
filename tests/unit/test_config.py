"""
Unit tests for settings and logging configuration.
"""

import pytest
from structlog.testing import capture_logs

from formwire.config import Settings
from formwire.logging_config import get_logger, setup_logging


class TestSettings:
    """Tests for Settings defaults and environment overrides."""

    @pytest.mark.unit
    def test_defaults(self):
        defaults = Settings(_env_file=None)

        assert defaults.max_body_size_mb == 25
        assert defaults.max_parts == 100
        assert defaults.log_level == "INFO"

    @pytest.mark.unit
    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("MAX_PARTS", "7")
        monkeypatch.setenv("LOG_JSON", "false")

        overridden = Settings(_env_file=None)

        assert overridden.max_parts == 7
        assert overridden.log_json is False


class TestLogging:
    """Tests for structlog setup."""

    @pytest.mark.unit
    def test_setup_logging_and_log(self):
        setup_logging()

        with capture_logs() as logs:
            get_logger("formwire.test").info("Logging configured", check=True)

        assert len(logs) == 1
        assert logs[0]["event"] == "Logging configured"
        assert logs[0]["log_level"] == "info"
        assert logs[0]["check"] is True
