"""
DSL Validator

validate_node / validate_page run the compiled pydantic schemas and turn
failures into cms_sdk.exceptions.ValidationError carrying a list of
``{"path", "message", "type"}`` violations. Paths are JSON-pointer style
(``/children/0/params``), the empty string meaning the value itself.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from cms_sdk.exceptions import ErrorCode, ValidationError
from cms_sdk.validation.schemas import Node, Page


def _violations(exc: PydanticValidationError) -> list[dict[str, Any]]:
    violations = []
    for error in exc.errors():
        path = "".join(f"/{loc}" for loc in error["loc"])
        violations.append({"path": path, "message": error["msg"], "type": error["type"]})
    return violations


def validate_node(node: Any) -> Node:
    """Validate a Node tree, recursively. Returns the parsed model."""
    try:
        return Node.model_validate(node)
    except PydanticValidationError as exc:
        raise ValidationError("Invalid node", _violations(exc), ErrorCode.DSL_INVALID_NODE) from exc


def validate_page(page: Any) -> Page:
    """Validate a Page, then re-validate its root for node-level context."""
    try:
        parsed = Page.model_validate(page)
    except PydanticValidationError as exc:
        raise ValidationError("Invalid page", _violations(exc), ErrorCode.DSL_INVALID_PAGE) from exc

    root = page.get("root") if isinstance(page, Mapping) else getattr(page, "root", None)
    if root:
        validate_node(root)
    return parsed
