"""
Composer Routes

GET /v1/pages/{slug} → stored page run through locale, A/B and feature-flag
                       middleware, validated, returned as JSON

Request inputs read by the pipeline:
    x-user-id        A/B identity
    x-flags          comma-separated list of enabled feature flags
    ?locale= / ?lang= / Accept-Language
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request

from cms_sdk.container import Container  # noqa: TC001
from cms_sdk.dependencies import get_request_scope
from cms_sdk.exceptions import PageNotFoundError
from cms_sdk.middleware.context import RequestInfo
from cms_sdk.services.composition import build_context, compose_page

router = APIRouter(prefix="/v1/pages", tags=["Composer"])
logger = logging.getLogger(__name__)


@router.get("/{slug}")
async def get_composed_page(slug: str, request: Request, scope: Container = Depends(get_request_scope)) -> dict[str, Any]:
    page = await scope.resolve("PagesRepository").find_by_slug(slug)
    if page is None:
        raise PageNotFoundError(slug)

    ctx = build_context(page, RequestInfo.from_request(request))
    return await compose_page(page, ctx, scope.resolve("CompositionPipeline"))
