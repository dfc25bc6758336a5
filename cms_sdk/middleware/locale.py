"""
Locale Resolver Middleware

Sets ctx.locale from:
  1. ``locale`` (or ``lang``) query parameter
  2. Accept-Language header (primary tag of the first entry)
  3. the configured default

Pure header/query parsing; sets one field and continues the chain.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cms_sdk.i18n.locale import parse_accept_language

if TYPE_CHECKING:
    from cms_sdk.middleware.context import Middleware, Next, PipelineContext


def resolve_locale(ctx: PipelineContext, default_locale: str = "en") -> str:
    query = ctx.request.query
    locale = (
        query.get("locale")
        or query.get("lang")
        or parse_accept_language(ctx.request.header("accept-language"))
        or default_locale
    )
    if not isinstance(locale, str) or not locale:
        locale = default_locale
    return locale


def locale_resolver(default_locale: str = "en") -> Middleware:
    async def locale_middleware(ctx: PipelineContext, next: Next) -> None:
        ctx.locale = resolve_locale(ctx, default_locale)
        await next()

    return locale_middleware
