"""
Test Configuration
==================

Pytest configuration with fixtures for all test types.
Provides test settings, clean process-wide stores and sample nodes.
"""

from typing import Generator

import pytest
from pydantic_settings import SettingsConfigDict

import noderaster.config.settings as settings_module
from noderaster.config.settings import Settings
from noderaster.core.images import blobs, cache, conversion_warnings
from noderaster.models.schemas import Paint, PaintType, SceneNode

from tests.utils.mocks import RecordingHostExporter


# Test settings override
class TestSettings(Settings):
    """Test-specific settings."""

    environment: str = "testing"
    log_level: str = "DEBUG"

    model_config = SettingsConfigDict(env_file=".env.test")


@pytest.fixture(scope="session")
def test_settings() -> TestSettings:
    """Test settings fixture."""
    return TestSettings()


@pytest.fixture(autouse=True)
def override_settings(test_settings: TestSettings) -> Generator[TestSettings, None, None]:
    """Override package settings for testing."""
    previous = settings_module.settings
    settings_module.settings = test_settings
    yield test_settings
    settings_module.settings = previous


@pytest.fixture(autouse=True)
def clean_global_state() -> Generator[None, None, None]:
    """Reset process-wide blob store, warnings and cache around each test."""
    blobs._global_blob_store = None
    cache._global_cache = None
    conversion_warnings._global_warnings = None
    yield
    blobs._global_blob_store = None
    cache._global_cache = None
    conversion_warnings._global_warnings = None


@pytest.fixture
def host_exporter() -> RecordingHostExporter:
    """Host export primitive returning a fixed PNG payload."""
    return RecordingHostExporter()


@pytest.fixture
def frame_node() -> SceneNode:
    """Frame with three direct children of mixed visibility and a nested grandchild."""
    grandchild = SceneNode(id="1:5", name="Grandchild", visible=True)
    return SceneNode(
        id="1:1",
        name="Frame",
        fills=[Paint(type=PaintType.SOLID, color={"r": 1.0, "g": 1.0, "b": 1.0})],
        children=[
            SceneNode(id="1:2", name="Visible child", visible=True),
            SceneNode(id="1:3", name="Hidden child", visible=False),
            SceneNode(id="1:4", name="Group", visible=True, children=[grandchild]),
        ],
    )
