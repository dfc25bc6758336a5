"""
Container plugin — wraps already-rendered children in a block element.

Params: ``{class?, tag?: div|section|article|main|aside}``
"""

from __future__ import annotations

from cms_sdk.plugins.base import Plugin, PluginMetadata, RenderArgs
from cms_sdk.utils.sanitize import class_attribute

_SCHEMA = {
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "class": {"type": "string"},
        "tag": {"type": "string", "enum": ["div", "section", "article", "main", "aside"]},
    },
}

_META = PluginMetadata(
    name="Container",
    category="layout",
    description="Block element wrapping its children",
    tags=["layout", "block"],
)


class ContainerPlugin(Plugin):
    id = "Container"
    schema = _SCHEMA

    @property
    def meta(self) -> PluginMetadata:
        return _META

    async def render(self, args: RenderArgs) -> str:
        tag = args.params.get("tag") or "div"
        return f"<{tag}{class_attribute(args.params.get('class'))}>{args.children or ''}</{tag}>"
