"""
Pytest configuration and fixtures for CMS SDK tests
"""

import os
import sys

import pytest
from fastapi.testclient import TestClient

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))  # noqa: PTH100, PTH118, PTH120

from cms_sdk.config import Settings  # noqa: E402
from cms_sdk.main import create_app  # noqa: E402
from cms_sdk.plugins import PluginRegistry, register_builtins  # noqa: E402
from cms_sdk.renderers import HTMLRenderer  # noqa: E402


def make_settings(**overrides) -> Settings:
    """Settings isolated from the developer's environment and .env file."""
    values = {"pages_backend": "memory", "plugins_backend": "none"}
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def registry() -> PluginRegistry:
    """A fresh registry with the built-in plugins registered."""
    return register_builtins(PluginRegistry())


@pytest.fixture
def renderer(registry: PluginRegistry) -> HTMLRenderer:
    return HTMLRenderer(registry)


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def app(settings: Settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    """Test client; the lifespan is not run unless used as a context manager."""
    return TestClient(app)


@pytest.fixture
def settings_factory():
    """Build isolated Settings with overrides, e.g. ``settings_factory(plugins_backend="file")``."""
    return make_settings
