"""
Render service: validate a posted page or tree and produce HTML or data.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from cms_sdk.exceptions import CMSError, ErrorCode
from cms_sdk.middleware.context import PipelineContext, RequestInfo
from cms_sdk.validation.validator import validate_node, validate_page

if TYPE_CHECKING:
    from cms_sdk.renderers.html import HTMLRenderer
    from cms_sdk.renderers.json import JSONRenderer


def extract_tree(body: dict[str, Any]) -> tuple[dict[str, Any] | None, dict[str, Any]]:
    """Return ``(page, tree)`` from a ``{"page": ...}`` or ``{"tree": ...}`` body."""
    if body.get("page"):
        page = body["page"]
        validate_page(page)
        return page, page["root"]
    if body.get("tree"):
        tree = body["tree"]
        validate_node(tree)
        return None, tree
    raise CMSError("Missing page or tree in body", status_code=400, error_code=ErrorCode.BAD_REQUEST)


def wants_html(format_param: str | None, accept: str | None) -> bool:
    if (format_param or "").lower() == "html":
        return True
    return "text/html" in (accept or "")


async def render_html(renderer: HTMLRenderer, tree: dict[str, Any], request: RequestInfo) -> str:
    return await renderer.render(tree, PipelineContext(tree=tree, request=request))


async def render_json(renderer: JSONRenderer, page: dict[str, Any] | None, tree: dict[str, Any]) -> dict[str, Any]:
    return {
        "tree": await renderer.render(tree),
        "meta": page.get("meta") if page else None,
        "version": page.get("version") if page else None,
    }
