"""
DSL Schemas

Pydantic models for the declarative composition DSL:

    Node — ``{type, params, key?, children?}``, recursive through ``children``
    Page — ``{version, meta, root}`` where ``root`` is a Node

Both reject unknown top-level keys. ``meta`` accepts extra keys.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator

# Dotted numeric version with at most three components: "1", "1.0", "1.0.0"
VERSION_PATTERN = r"^(0|[1-9]\d*)(\.(0|[1-9]\d*)){0,2}$"


class Node(BaseModel):
    model_config = ConfigDict(extra="forbid")

    type: StrictStr = Field(..., min_length=1, description="Plugin id that renders this node.")
    # optional, but a string when present: the None default is never validated
    key: StrictStr = Field(None, description="Optional stable identity for clients.")
    params: dict[str, Any] = Field(..., description="Plugin parameters.")
    children: list[Node] | None = Field(None, description="Child nodes, rendered in order.")

    @field_validator("children", mode="before")
    @classmethod
    def children_not_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("children must be an array when present")
        return value


class PageMeta(BaseModel):
    model_config = ConfigDict(extra="allow")

    slug: StrictStr = None
    title: StrictStr = None
    locale: StrictStr = None


class Page(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "example": {
                "version": "1.0.0",
                "meta": {"slug": "home", "title": "Home", "locale": "en"},
                "root": {
                    "type": "Container",
                    "params": {},
                    "children": [{"type": "TextBlock", "params": {"text": "Welcome!"}}],
                },
            }
        },
    )

    version: StrictStr = Field(..., pattern=VERSION_PATTERN)
    meta: PageMeta
    root: Node
