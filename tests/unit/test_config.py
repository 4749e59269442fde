"""Tests for configuration management."""

import os
import pytest
from unittest.mock import patch

from cursorpage.config import Settings, get_settings


class TestSettings:
    """Test Settings class."""

    def test_default_values(self):
        """Test default configuration values."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.app_name == "Cursor Pagination API"
        assert settings.debug is False
        assert settings.host == "0.0.0.0"
        assert settings.port == 8000
        assert settings.log_level == "INFO"
        assert settings.default_page_size == 10
        assert settings.max_page_size == 100
        assert settings.default_order == "created_at"
        assert settings.default_direction == -1
        assert settings.prefetch is True
        assert settings.strict_cursors is True

    def test_environment_override(self):
        """Test that environment variables override defaults."""
        env_vars = {
            "APP_NAME": "Test API",
            "DEBUG": "true",
            "PORT": "9000",
            "LOG_LEVEL": "DEBUG",
            "DEFAULT_PAGE_SIZE": "25",
            "DEFAULT_ORDER": "updated_at",
            "DEFAULT_DIRECTION": "1",
            "PREFETCH": "false",
            "STRICT_CURSORS": "false"
        }

        with patch.dict(os.environ, env_vars):
            settings = Settings()

            assert settings.app_name == "Test API"
            assert settings.debug is True
            assert settings.port == 9000
            assert settings.log_level == "DEBUG"
            assert settings.default_page_size == 25
            assert settings.default_order == "updated_at"
            assert settings.default_direction == 1
            assert settings.prefetch is False
            assert settings.strict_cursors is False

    def test_log_level_validation(self):
        """Test log level validation."""
        for level in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            assert Settings(log_level=level).log_level == level

        assert Settings(log_level="debug").log_level == "DEBUG"

        with pytest.raises(ValueError, match="Log level must be one of"):
            Settings(log_level="VERBOSE")

    @pytest.mark.parametrize("direction", [0, 2, -2])
    def test_default_direction_validation(self, direction):
        """Test default direction must be 1 or -1."""
        with pytest.raises(ValueError, match="Default direction"):
            Settings(default_direction=direction)

    @pytest.mark.parametrize("field", ["default_page_size", "max_page_size"])
    def test_page_size_validation(self, field):
        """Test page sizes must be positive."""
        with pytest.raises(ValueError, match="Page size"):
            Settings(**{field: 0})


class TestGetSettings:
    """Test get_settings function."""

    def test_returns_global_instance(self):
        assert get_settings() is get_settings()
        assert isinstance(get_settings(), Settings)
