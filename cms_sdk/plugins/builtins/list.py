"""
List plugin — ``<ul>``/``<ol>`` of escaped items.

Params: ``{items, ordered?, class?, itemClass?, itemKey?}``. Primitive items
are stringified directly; mappings use ``itemKey`` when present, anything
else falls back to compact JSON.
"""

from __future__ import annotations

import json
from typing import Any

from cms_sdk.plugins.base import Plugin, PluginMetadata, RenderArgs
from cms_sdk.utils.sanitize import class_attribute, escape_html

_SCHEMA = {
    "type": "object",
    "additionalProperties": False,
    "required": ["items"],
    "properties": {
        "items": {"type": "array"},
        "ordered": {"type": "boolean"},
        "class": {"type": "string"},
        "itemClass": {"type": "string"},
        "itemKey": {"type": "string"},
    },
}

_META = PluginMetadata(
    name="List",
    category="content",
    description="Ordered or unordered list of items",
    tags=["list", "items"],
)


def item_to_string(item: Any, item_key: str | None = None) -> str:
    if item is None:
        return ""
    if isinstance(item, bool):
        return "true" if item else "false"
    if isinstance(item, float) and item.is_integer():
        return str(int(item))
    if isinstance(item, (str, int, float)):
        return str(item)
    if item_key and isinstance(item, dict) and item_key in item:
        value = item[item_key]
        return "" if value is None else str(value)
    try:
        return json.dumps(item, separators=(",", ":"), ensure_ascii=False)
    except (TypeError, ValueError):
        return str(item)


class ListPlugin(Plugin):
    id = "List"
    schema = _SCHEMA

    @property
    def meta(self) -> PluginMetadata:
        return _META

    async def render(self, args: RenderArgs) -> str:
        params = args.params
        tag = "ol" if params.get("ordered") else "ul"
        item_cls = class_attribute(params.get("itemClass"))
        items = params.get("items") or []
        html_items = "".join(
            f"<li{item_cls}>{escape_html(item_to_string(item, params.get('itemKey')))}</li>" for item in items
        )
        return f"<{tag}{class_attribute(params.get('class'))}>{html_items}</{tag}>"
