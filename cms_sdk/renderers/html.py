"""
HTML Renderer

Walks a node tree depth-first. For each node: check the allowlist, look up
the plugin, validate params, render every child in order, then hand the
concatenated children to the plugin. Any failure aborts the whole render;
there is no partial output and no caching between calls.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from cms_sdk.exceptions import PluginBadReturnError, PluginMissingError, PluginNotAllowedError, RenderError
from cms_sdk.plugins.base import RenderArgs, is_renderable

if TYPE_CHECKING:
    from cms_sdk.plugins.registry import PluginRegistry

logger = logging.getLogger(__name__)


class HTMLRenderer:
    def __init__(self, registry: PluginRegistry):
        if registry is None:
            raise RenderError("HTMLRenderer requires a plugin registry")
        self.registry = registry

    async def render(self, tree: Mapping[str, Any] | None, context: Any = None) -> str:
        """Render ``tree`` to HTML. A ``None`` tree (fully pruned) renders as ``""``."""
        if not tree:
            return ""
        return await self._render_node(tree, context if context is not None else {})

    async def _render_node(self, node: Mapping[str, Any], context: Any) -> str:
        node_type = node.get("type")
        params = node.get("params") or {}
        children = node.get("children") or []

        if not self.registry.is_allowed(node_type):
            raise PluginNotAllowedError(node_type)

        plugin = self.registry.get(node_type)
        if not is_renderable(plugin):
            raise PluginMissingError(node_type)

        self.registry.validate_params(node_type, params)

        parts = []
        for child in children:
            parts.append(await self._render_node(child, context))

        result = plugin.render(
            RenderArgs(
                node=node,
                params=params,
                children="".join(parts),
                context=context,
                registry=self.registry,
            )
        )
        if inspect.isawaitable(result):
            result = await result
        if not isinstance(result, str):
            raise PluginBadReturnError(node_type, result)
        return result
