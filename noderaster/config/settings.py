"""
Package Settings
================

Package settings and environment configuration using Pydantic Settings.
Supports development, testing, and production environments.
"""

from typing import List, Union
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
import json


class Settings(BaseSettings):
    """Main package settings with environment variable support."""

    # Application Configuration
    app_name: str = Field(default="Node Raster", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    environment: str = Field(
        default="development", description="Environment: development, testing, production"
    )
    log_level: str = Field(default="INFO", description="Logging level")

    # Placeholder Configuration
    placeholder_min_font_size: int = Field(
        default=12, ge=1, description="Smallest placeholder label font size in pixels"
    )
    placeholder_font_ratio: float = Field(
        default=0.15, gt=0, description="Placeholder font size as a fraction of the width"
    )
    placeholder_text_color: str = Field(
        default="#888888", description="Placeholder label fill color"
    )
    placeholder_fonts: List[str] = Field(
        default=[
            "Inter-Bold.ttf",
            "Arial Bold.ttf",
            "arialbd.ttf",
            "Helvetica-Bold.ttf",
            "DejaVuSans-Bold.ttf",
            "LiberationSans-Bold.ttf",
            "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
            "/usr/share/fonts/truetype/liberation/LiberationSans-Bold.ttf",
        ],
        description="Bold font files tried in order for off-screen placeholders",
    )
    placeholder_css_font_family: str = Field(
        default="Inter, Arial, Helvetica, sans-serif",
        description="CSS font family used for browser canvas placeholders",
    )

    # Blob Configuration
    blob_origin: str = Field(default="noderaster", description="Origin used in blob object URLs")

    # Browser Configuration
    playwright_headless: bool = Field(default=True, description="Run browser in headless mode")
    playwright_timeout: int = Field(default=30000, description="Playwright timeout in milliseconds")
    browser_pool_size: int = Field(default=1, ge=1, description="Browser instance pool size")

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        allowed = {"development", "testing", "production"}
        if v not in allowed:
            raise ValueError(f"Environment must be one of: {allowed}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"Log level must be one of: {allowed}")
        return v.upper()

    @field_validator("placeholder_fonts", mode="before")
    @classmethod
    def parse_placeholder_fonts(cls, v: Union[str, List[str]]) -> List[str]:
        """Parse font candidates from string or list."""
        if isinstance(v, str):
            v = v.strip()
            if v.startswith("[") and v.endswith("]"):
                try:
                    return json.loads(v)
                except json.JSONDecodeError:
                    pass
            return [font.strip() for font in v.split(",") if font.strip()]
        return v

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, env_prefix="NODERASTER_"
    )


# Global settings instance - will be initialized when needed
settings = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global settings
    if settings is None:
        settings = Settings()
    return settings


def reload_settings() -> Settings:
    """Reload settings from environment."""
    global settings
    settings = Settings()
    return settings
