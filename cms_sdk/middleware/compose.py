"""
Middleware Pipeline

compose() turns an ordered list of ``async (ctx, next)`` middlewares into a
single awaitable runner. Each middleware must await ``next()`` to continue;
not calling it short-circuits the rest of the chain. Past the last
middleware ``next`` runs the optional outer continuation, or does nothing.

Exceptions are not caught here: they propagate out of the runner to the
hosting layer.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from cms_sdk.exceptions import ErrorCode, MiddlewareError

if TYPE_CHECKING:
    from cms_sdk.middleware.context import Middleware, Next, PipelineContext


class Pipeline:
    """An ordered middleware list plus an index-driven executor."""

    def __init__(self, middleware: Iterable[Middleware]):
        if isinstance(middleware, (str, bytes)) or not isinstance(middleware, Iterable):
            raise MiddlewareError("Middleware stack must be a list")
        stack = tuple(middleware)
        for fn in stack:
            if not callable(fn):
                raise MiddlewareError("Middleware must be callables")
        self.middleware = stack

    def __len__(self) -> int:
        return len(self.middleware)

    async def __call__(self, ctx: PipelineContext, next: Next | None = None) -> None:
        index = -1

        async def dispatch(i: int) -> None:
            nonlocal index
            if i <= index:
                raise MiddlewareError("next() called multiple times", ErrorCode.MIDDLEWARE_NEXT_REPEATED)
            index = i
            if i == len(self.middleware):
                if next is not None:
                    await next()
                return
            await self.middleware[i](ctx, lambda: dispatch(i + 1))

        await dispatch(0)


def compose(middleware: Iterable[Middleware]) -> Pipeline:
    return Pipeline(middleware)
