"""
Recordbook: Settings and Logging Helper Tests
================================================
"""

import logging

import pytest
from pydantic import ValidationError as SettingsValidationError

from recordbook.config import Settings
from recordbook.middleware.logging import level_for_status


class TestSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        monkeypatch.delenv("LOG_LEVEL", raising=False)

        config = Settings(_env_file=None)

        assert config.database_url == "sqlite+aiosqlite:///./example.db"
        assert config.backend_port == 8080
        assert config.log_level == "INFO"
        assert config.get_one_missing_as_not_found is False

    def test_log_level_normalized(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_log_level_rejected(self):
        with pytest.raises(SettingsValidationError):
            Settings(log_level="chatty")

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("GET_ONE_MISSING_AS_NOT_FOUND", "true")
        monkeypatch.setenv("BACKEND_PORT", "9090")

        config = Settings(_env_file=None)

        assert config.get_one_missing_as_not_found is True
        assert config.backend_port == 9090


class TestAccessLogLevel:

    @pytest.mark.parametrize(
        "status, level",
        [(200, logging.INFO), (204, logging.INFO), (404, logging.WARNING), (500, logging.ERROR)],
    )
    def test_level_for_status(self, status, level):
        assert level_for_status(status) == level
