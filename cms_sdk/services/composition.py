"""
Page composition service.

Runs the locale -> A/B -> feature-flag pipeline over a stored page and
returns the composed page as data. Used by the composer host; contains no
HTTP types so it can be driven directly.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from cms_sdk.middleware.abtest import ab_bucket
from cms_sdk.middleware.compose import Pipeline, compose
from cms_sdk.middleware.context import PipelineContext, RequestInfo
from cms_sdk.middleware.flags import feature_flag_gate
from cms_sdk.middleware.locale import locale_resolver
from cms_sdk.validation.validator import validate_page

if TYPE_CHECKING:
    from cms_sdk.config import Settings

logger = logging.getLogger(__name__)


def parse_flags_header(value: str | None) -> dict[str, bool]:
    """``"newHeader, beta"`` -> ``{"newHeader": True, "beta": True}``."""
    if not value:
        return {}
    return {name.strip(): True for name in value.split(",") if name.strip()}


def build_pipeline(settings: Settings) -> Pipeline:
    return compose(
        [
            locale_resolver(default_locale=settings.default_locale),
            ab_bucket(buckets=settings.ab_buckets, salt=settings.ab_salt),
            feature_flag_gate(),
        ]
    )


def build_context(page: dict[str, Any], request: RequestInfo) -> PipelineContext:
    return PipelineContext(
        request=request,
        user_id=request.header("x-user-id"),
        flags=parse_flags_header(request.header("x-flags")),
        tree=page.get("root"),
        page=page,
    )


async def compose_page(page: dict[str, Any], ctx: PipelineContext, pipeline: Pipeline) -> dict[str, Any]:
    """Run ``pipeline`` over ``ctx`` and validate the resulting page."""
    await pipeline(ctx)
    composed = {
        **page,
        "root": ctx.tree,
        "meta": {**page.get("meta", {}), "locale": ctx.locale, "ab": ctx.ab["bucket"] if ctx.ab else None},
    }
    validate_page(composed)
    logger.debug("Composed page %s (locale=%s, ab=%s)", composed["meta"].get("slug"), ctx.locale, composed["meta"]["ab"])
    return composed
