"""Tests for settings and logging configuration."""

import pytest
import structlog
from pydantic import ValidationError

from py_pluma.config import Settings
from py_pluma.core import RefinementOptions
from py_pluma.logging_config import configure_logging


class TestSettings:
    """Test environment driven settings."""

    def test_defaults_match_options(self):
        """Test that default settings produce default refinement options."""
        settings = Settings()
        assert RefinementOptions.from_settings(settings) == RefinementOptions()

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("PLUMA_ITERATIONS", "25")
        monkeypatch.setenv("PLUMA_STEP_SIZE", "0.1")
        monkeypatch.setenv("PLUMA_LOG_FORMAT", "json")

        settings = Settings()
        options = RefinementOptions.from_settings(settings)

        assert options.iterations == 25
        assert options.step_size == 0.1
        assert settings.log_format == "json"

    def test_invalid_value_rejected(self, monkeypatch):
        monkeypatch.setenv("PLUMA_RESOLUTION", "0")
        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_log_format_rejected(self):
        with pytest.raises(ValidationError):
            Settings(log_format="xml")

    def test_unknown_setting_rejected(self):
        with pytest.raises(ValidationError):
            Settings(cells_desired=10)

    def test_invalid_log_level_rejected(self, monkeypatch):
        with pytest.raises(ValidationError):
            Settings(log_level="VERBOSE")

        monkeypatch.setenv("PLUMA_LOG_LEVEL", "bogus")
        with pytest.raises(ValidationError):
            Settings()


class TestLogging:
    """Test structlog setup."""

    @pytest.mark.parametrize("fmt", ["plain", "json"])
    def test_configure_logging(self, fmt):
        configure_logging("DEBUG", fmt)
        logger = structlog.get_logger("py_pluma.test")
        logger.debug("configured", fmt=fmt)
        assert structlog.is_configured()
        structlog.reset_defaults()

    def test_unknown_level_rejected(self):
        with pytest.raises(ValueError):
            configure_logging("bogus")
