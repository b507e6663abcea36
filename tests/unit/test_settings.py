"""
Unit Tests for Settings and Logging
===================================
"""

import pytest
from pydantic import ValidationError

from noderaster.config.logging import get_logger, get_logging_config
from noderaster.config.settings import Settings, get_settings
from noderaster.models.schemas import PlaceholderDimensions


class TestSettings:
    """Test settings parsing and validation."""

    def test_defaults(self):
        """Test placeholder defaults."""
        settings = Settings()

        assert settings.placeholder_min_font_size == 12
        assert settings.placeholder_font_ratio == 0.15
        assert settings.placeholder_text_color == "#888888"
        assert settings.blob_origin == "noderaster"

    def test_environment_variables(self, monkeypatch):
        """Test values read from prefixed environment variables."""
        monkeypatch.setenv("NODERASTER_ENVIRONMENT", "production")
        monkeypatch.setenv("NODERASTER_LOG_LEVEL", "warning")
        monkeypatch.setenv("NODERASTER_PLACEHOLDER_FONTS", '["A.ttf", "B.ttf"]')

        settings = Settings()

        assert settings.environment == "production"
        assert settings.log_level == "WARNING"
        assert settings.placeholder_fonts == ["A.ttf", "B.ttf"]

    def test_comma_separated_fonts(self):
        """Test font candidates given as a comma-separated string."""
        settings = Settings(placeholder_fonts="A.ttf, B.ttf")
        assert settings.placeholder_fonts == ["A.ttf", "B.ttf"]

    def test_invalid_environment(self):
        """Test unknown environments are rejected."""
        with pytest.raises(ValidationError):
            Settings(environment="staging")

    def test_invalid_log_level(self):
        """Test unknown log levels are rejected."""
        with pytest.raises(ValidationError):
            Settings(log_level="LOUD")

    def test_test_settings_active(self):
        """Test the test settings override is in place."""
        assert get_settings().environment == "testing"


class TestLogging:
    """Test logging configuration."""

    def test_logging_config_console_only(self):
        """Test only a console handler is configured."""
        config = get_logging_config(Settings(log_level="DEBUG"))

        assert list(config["handlers"]) == ["console"]
        assert config["loggers"]["noderaster"]["level"] == "DEBUG"

    def test_get_logger(self):
        """Test structured loggers can be bound."""
        logger = get_logger("noderaster.tests")
        assert logger.bind(component="test") is not None


class TestPlaceholderDimensions:
    """Test placeholder dimension coercion."""

    def test_height_defaults_to_width(self):
        """Test square defaults."""
        assert PlaceholderDimensions(width=200).resolved_height == 200

    def test_truncation(self):
        """Test fractional sizes are truncated."""
        dimensions = PlaceholderDimensions.from_size(10.9, 5.5)
        assert (dimensions.width, dimensions.resolved_height) == (10, 5)

    def test_negative_values(self):
        """Test negative widths clamp to zero and negative heights fall back to the width."""
        assert PlaceholderDimensions.from_size(-5).width == 0
        assert PlaceholderDimensions.from_size(30, -1).resolved_height == 30

