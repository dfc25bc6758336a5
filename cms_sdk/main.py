"""
Application factory for the composer and renderer hosts.

Both route groups share one IoC container built from Settings. On startup
the plugin allowlist is loaded from the configured repository (before any
traffic is accepted); on shutdown the container disposes its singletons.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from cms_sdk.bootstrap import build_container, uses_database
from cms_sdk.config import Settings, settings as default_settings
from cms_sdk.database import init_models
from cms_sdk.exception_handlers import register_exception_handlers
from cms_sdk.middleware.logging import RequestLoggingMiddleware
from cms_sdk.routes import pages, render

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    container = app.state.container
    app_settings = container.resolve("Settings")

    if uses_database(app_settings):
        await init_models(container.resolve("DatabaseEngine"))

    registry = container.resolve("PluginRegistry")
    ids = await registry.load_allowlist_from_repo()
    logger.info("Plugin allowlist loaded: %s", "unrestricted" if registry.allowlist is None else ids)

    yield

    await container.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    app_settings = settings or default_settings

    app = FastAPI(title=app_settings.app_name, version=app_settings.app_version, lifespan=lifespan)
    app.state.container = build_container(app_settings)

    app.add_middleware(RequestLoggingMiddleware)
    register_exception_handlers(app)

    app.include_router(pages.router)
    app.include_router(render.router)

    @app.get("/health")
    async def health():
        return {"ok": True}

    return app
