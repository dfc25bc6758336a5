"""
FastAPI dependencies exposing the IoC container to route handlers.
"""

from collections.abc import AsyncGenerator

from fastapi import Request

from cms_sdk.container import Container


def get_container(request: Request) -> Container:
    return request.app.state.container


async def get_request_scope(request: Request) -> AsyncGenerator[Container, None]:
    """One container scope per request: scoped services live for the request only."""
    scope = get_container(request).create_scope()
    try:
        yield scope
    finally:
        await scope.dispose()
