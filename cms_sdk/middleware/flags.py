"""
Feature Flag Gate Middleware

Prunes ctx.tree using each node's ``params.featureFlag`` descriptor, either
a flag name or ``{"name": ..., "invert": bool}``.

Pruning is top-down: a node whose flag check fails is dropped together with
its whole subtree (children are never promoted). Kept nodes are cloned with
``featureFlag`` removed from their params so the flag never reaches a
renderer. Pruning the root leaves ``ctx.tree = None``.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from cms_sdk.middleware.context import Middleware, Next, PipelineContext

FLAG_PARAM = "featureFlag"


@dataclass(frozen=True)
class FlagDescriptor:
    name: str
    invert: bool = False


def normalize_flag_descriptor(value: Any) -> FlagDescriptor | None:
    """Return a FlagDescriptor, or None when ``value`` is absent or malformed."""
    if not value:
        return None
    if isinstance(value, str):
        return FlagDescriptor(name=value)
    if isinstance(value, Mapping) and isinstance(value.get("name"), str):
        return FlagDescriptor(name=value["name"], invert=bool(value.get("invert")))
    return None


def prune_by_flag(
    node: Mapping[str, Any] | None,
    is_enabled: Callable[[str, Any], bool],
    ctx: Any,
) -> dict[str, Any] | None:
    if not node:
        return None

    params = node.get("params")
    params = params if isinstance(params, Mapping) else {}

    descriptor = normalize_flag_descriptor(params.get(FLAG_PARAM))
    if descriptor is not None:
        enabled = bool(is_enabled(descriptor.name, ctx))
        keep = not enabled if descriptor.invert else enabled
        if not keep:
            return None

    pruned = {**node, "params": {key: value for key, value in params.items() if key != FLAG_PARAM}}
    if "children" in node:
        children = []
        for child in node.get("children") or []:
            kept = prune_by_flag(child, is_enabled, ctx)
            if kept is not None:
                children.append(kept)
        pruned["children"] = children
    return pruned


def default_get_flags(ctx: PipelineContext) -> Mapping[str, bool]:
    return getattr(ctx, "flags", None) or {}


def feature_flag_gate(
    get_flags: Callable[[Any], Mapping[str, bool]] | None = None,
    is_enabled: Callable[[str, Any], bool] | None = None,
) -> Middleware:
    """
    Build the gate.

    Args:
        get_flags:  ``ctx -> {name: bool}``; defaults to ``ctx.flags``.
        is_enabled: ``(name, ctx) -> bool``; overrides the flag lookup entirely.
    """
    flags_source = get_flags or default_get_flags

    def lookup(name: str, ctx: Any) -> bool:
        return bool(flags_source(ctx).get(name))

    check = is_enabled or lookup

    async def feature_flag_middleware(ctx: PipelineContext, next: Next) -> None:
        if ctx.tree:
            ctx.tree = prune_by_flag(ctx.tree, check, ctx)
        await next()

    return feature_flag_middleware
