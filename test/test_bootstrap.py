"""
Container Wiring Tests

build_container() selects collaborator backends from Settings.
"""

import asyncio

import pytest

from cms_sdk.bootstrap import build_container, uses_database
from cms_sdk.middleware.compose import Pipeline
from cms_sdk.plugins import PluginRegistry
from cms_sdk.renderers import HTMLRenderer, JSONRenderer
from cms_sdk.repos import FilePluginsRepository, InMemoryPagesRepository


class TestSettings:
    def test_defaults(self, settings):
        assert settings.default_locale == "en"
        assert settings.ab_salt == "cms-ab"
        assert settings.ab_buckets == ["A", "B"]
        assert settings.pages_backend == "memory"

    def test_env_prefix(self, monkeypatch, settings_factory):
        monkeypatch.setenv("CMS_DEFAULT_LOCALE", "fr")
        assert settings_factory().default_locale == "fr"


class TestBuildContainer:
    def test_default_wiring(self, settings):
        container = build_container(settings)
        assert container.resolve("Settings") is settings
        assert isinstance(container.resolve("PagesRepository"), InMemoryPagesRepository)
        assert container.resolve("PluginsRepository") is None
        assert isinstance(container.resolve("HTMLRenderer"), HTMLRenderer)
        assert isinstance(container.resolve("JSONRenderer"), JSONRenderer)
        assert not container.is_registered("DatabaseEngine")

    def test_registry_is_shared_singleton(self, settings):
        container = build_container(settings)
        registry = container.resolve("PluginRegistry")
        assert isinstance(registry, PluginRegistry)
        assert registry.types() == ["Container", "TextBlock", "Image", "List"]
        assert container.resolve("HTMLRenderer").registry is registry
        assert container.create_scope().resolve("PluginRegistry") is registry

    def test_pipeline_is_scoped(self, settings):
        container = build_container(settings)
        scope = container.create_scope()
        pipeline = scope.resolve("CompositionPipeline")
        assert isinstance(pipeline, Pipeline)
        assert len(pipeline) == 3
        assert scope.resolve("CompositionPipeline") is pipeline
        assert container.create_scope().resolve("CompositionPipeline") is not pipeline

    def test_file_plugins_backend(self, settings_factory, tmp_path):
        container = build_container(
            settings_factory(plugins_backend="file", plugins_config_file=str(tmp_path / "p.json"))
        )
        assert isinstance(container.resolve("PluginsRepository"), FilePluginsRepository)

    def test_sql_backend_registers_engine(self, settings_factory):
        settings = settings_factory(plugins_backend="sql", database_url="sqlite+aiosqlite://")
        assert uses_database(settings)
        container = build_container(settings)
        assert container.is_registered("DatabaseEngine")
        assert container.is_registered("SessionFactory")

    def test_engine_uses_container_settings(self, settings_factory):
        settings = settings_factory(plugins_backend="sql", database_url="sqlite+aiosqlite://", debug=True)
        container = build_container(settings)
        engine = container.resolve("DatabaseEngine")
        assert engine.echo is True
        assert str(engine.url) == "sqlite+aiosqlite://"
        asyncio.run(container.dispose())

    @pytest.mark.parametrize("overrides", [{"pages_backend": "redis"}, {"plugins_backend": "yaml"}])
    def test_unknown_backend(self, settings_factory, overrides):
        with pytest.raises(ValueError):
            build_container(settings_factory(**overrides))
