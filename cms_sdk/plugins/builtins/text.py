"""
TextBlock plugin — a single escaped run of text.

Params: ``{text, tag?: p|h1|h2|h3|span|div, class?}``
"""

from __future__ import annotations

from cms_sdk.plugins.base import Plugin, PluginMetadata, RenderArgs
from cms_sdk.utils.sanitize import class_attribute, escape_html

_SCHEMA = {
    "type": "object",
    "additionalProperties": False,
    "required": ["text"],
    "properties": {
        "text": {"type": "string"},
        "tag": {"type": "string", "enum": ["p", "h1", "h2", "h3", "span", "div"]},
        "class": {"type": "string"},
    },
}

_META = PluginMetadata(
    name="TextBlock",
    category="content",
    description="Paragraph or heading of plain text",
    tags=["text", "heading", "paragraph"],
)


class TextBlockPlugin(Plugin):
    id = "TextBlock"
    schema = _SCHEMA

    @property
    def meta(self) -> PluginMetadata:
        return _META

    async def render(self, args: RenderArgs) -> str:
        tag = args.params.get("tag") or "p"
        return f"<{tag}{class_attribute(args.params.get('class'))}>{escape_html(args.params['text'])}</{tag}>"
