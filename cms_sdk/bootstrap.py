"""
Service wiring for the hosts.

build_container() registers every collaborator the composer and renderer
routes resolve. Collaborator backends are chosen from Settings.
"""

from __future__ import annotations

import logging

from cms_sdk.config import Settings
from cms_sdk.container import CallableFactory, Container
from cms_sdk.database import build_engine, build_session_factory
from cms_sdk.plugins import PluginRegistry, register_builtins
from cms_sdk.renderers import HTMLRenderer, JSONRenderer
from cms_sdk.repos import FilePluginsRepository, InMemoryPagesRepository
from cms_sdk.services.composition import build_pipeline

logger = logging.getLogger(__name__)

PAGES_BACKENDS = ("memory", "sql")
PLUGINS_BACKENDS = ("none", "file", "sql")


def uses_database(settings: Settings) -> bool:
    return settings.pages_backend == "sql" or settings.plugins_backend == "sql"


def _pages_repository(container: Container):
    settings = container.resolve("Settings")
    if settings.pages_backend == "sql":
        from cms_sdk.repos.pages_sql import SqlPagesRepository

        return SqlPagesRepository(container.resolve("SessionFactory"))
    return InMemoryPagesRepository()


def _plugins_repository(container: Container):
    settings = container.resolve("Settings")
    if settings.plugins_backend == "file":
        return FilePluginsRepository(settings.plugins_config_file)
    if settings.plugins_backend == "sql":
        from cms_sdk.repos.plugins_sql import SqlPluginsRepository

        return SqlPluginsRepository(container.resolve("SessionFactory"))
    return None


def _database_engine(container: Container):
    settings = container.resolve("Settings")
    return build_engine(settings.database_url, echo=settings.debug)


def build_container(settings: Settings) -> Container:
    if settings.pages_backend not in PAGES_BACKENDS:
        raise ValueError(f"Unknown pages backend: {settings.pages_backend}")
    if settings.plugins_backend not in PLUGINS_BACKENDS:
        raise ValueError(f"Unknown plugins backend: {settings.plugins_backend}")

    container = Container()
    container.register_singleton("Settings", settings)

    if uses_database(settings):
        container.register_singleton(
            "DatabaseEngine",
            CallableFactory(
                _database_engine,
                dispose=lambda engine: engine.dispose(),
            ),
        )
        container.register_singleton("SessionFactory", lambda c: build_session_factory(c.resolve("DatabaseEngine")))

    container.register_singleton("PagesRepository", _pages_repository)
    container.register_singleton("PluginsRepository", _plugins_repository)
    container.register_singleton(
        "PluginRegistry",
        lambda c: register_builtins(PluginRegistry(repo=c.resolve("PluginsRepository"))),
    )
    container.register_singleton("HTMLRenderer", lambda c: HTMLRenderer(c.resolve("PluginRegistry")))
    container.register_singleton("JSONRenderer", JSONRenderer)
    container.register_scoped("CompositionPipeline", lambda c: build_pipeline(c.resolve("Settings")))

    logger.info(
        "Container built (pages=%s, plugins=%s)",
        settings.pages_backend,
        settings.plugins_backend,
    )
    return container
