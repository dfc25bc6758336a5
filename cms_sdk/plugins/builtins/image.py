"""
Image plugin — a self-closing ``<img>``.

Params: ``{src, alt?, width?, height?, class?}``; attributes are emitted
only when supplied, in that order.
"""

from __future__ import annotations

from cms_sdk.plugins.base import Plugin, PluginMetadata, RenderArgs
from cms_sdk.utils.sanitize import attribute

_SCHEMA = {
    "type": "object",
    "additionalProperties": False,
    "required": ["src"],
    "properties": {
        "src": {"type": "string", "minLength": 1},
        "alt": {"type": "string"},
        "width": {"type": "number"},
        "height": {"type": "number"},
        "class": {"type": "string"},
    },
}

_META = PluginMetadata(
    name="Image",
    category="media",
    description="Responsive image element",
    tags=["media", "img"],
)


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ImagePlugin(Plugin):
    id = "Image"
    schema = _SCHEMA

    @property
    def meta(self) -> PluginMetadata:
        return _META

    async def render(self, args: RenderArgs) -> str:
        params = args.params
        attrs = [attribute("src", params["src"])]
        if params.get("alt"):
            attrs.append(attribute("alt", params["alt"]))
        for dimension in ("width", "height"):
            value = params.get(dimension)
            if _is_number(value):
                attrs.append(attribute(dimension, int(value) if float(value).is_integer() else value))
        if params.get("class"):
            attrs.append(attribute("class", params["class"]))
        return f"<img {' '.join(attrs)} />"
