"""
Pipeline Context

The mutable record every composition middleware reads and writes. A
hosting layer fills ``request``, ``user_id``, ``flags`` and ``tree`` before
running the pipeline; middlewares fill ``locale`` and ``ab`` and may replace
``tree`` wholesale.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from fastapi import Request


@dataclass
class RequestInfo:
    """Transport-neutral view of the incoming request. Header names are lower-cased."""

    headers: dict[str, str] = field(default_factory=dict)
    query: dict[str, str] = field(default_factory=dict)
    cookies: dict[str, str] = field(default_factory=dict)
    user_id: str | None = None

    def __post_init__(self) -> None:
        self.headers = {str(name).lower(): value for name, value in self.headers.items()}

    def header(self, name: str, default: str | None = None) -> str | None:
        return self.headers.get(name.lower(), default)

    @classmethod
    def from_request(cls, request: Request) -> RequestInfo:
        return cls(
            headers=dict(request.headers),
            query=dict(request.query_params),
            cookies=dict(request.cookies),
        )


@dataclass
class PipelineContext:
    tree: dict[str, Any] | None = None
    flags: dict[str, bool] = field(default_factory=dict)
    locale: str | None = None
    ab: dict[str, Any] | None = None
    user_id: str | None = None
    request: RequestInfo = field(default_factory=RequestInfo)
    page: dict[str, Any] | None = None
    extra: dict[str, Any] = field(default_factory=dict)


Next = Callable[[], Awaitable[None]]
Middleware = Callable[[PipelineContext, Next], Awaitable[None]]
