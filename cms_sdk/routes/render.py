"""
Renderer Routes

POST /v1/render → body ``{"page": Page}`` or ``{"tree": Node}``

HTML is returned when ``?format=html`` or ``Accept: text/html``; otherwise
JSON ``{"tree", "meta", "version"}`` echoing the validated input.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Request
from fastapi.responses import HTMLResponse, JSONResponse

from cms_sdk.container import Container  # noqa: TC001
from cms_sdk.dependencies import get_container
from cms_sdk.middleware.context import RequestInfo
from cms_sdk.services.rendering import extract_tree, render_html, render_json, wants_html

router = APIRouter(prefix="/v1/render", tags=["Renderer"])
logger = logging.getLogger(__name__)


@router.post("")
async def render(
    request: Request,
    body: dict[str, Any] = Body(...),
    format: str | None = None,
    container: Container = Depends(get_container),
):
    page, tree = extract_tree(body)

    if wants_html(format, request.headers.get("accept")):
        html = await render_html(container.resolve("HTMLRenderer"), tree, RequestInfo.from_request(request))
        return HTMLResponse(content=html, status_code=200)

    return JSONResponse(content=await render_json(container.resolve("JSONRenderer"), page, tree))
