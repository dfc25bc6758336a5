"""
Built-in render plugins.

    register_builtins(registry) registers Container, TextBlock, Image and
    List, in that order, and returns the registry.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .container import ContainerPlugin
from .image import ImagePlugin
from .list import ListPlugin
from .text import TextBlockPlugin

if TYPE_CHECKING:
    from cms_sdk.plugins.registry import PluginRegistry

BUILTIN_PLUGINS = [ContainerPlugin, TextBlockPlugin, ImagePlugin, ListPlugin]


def register_builtins(registry: PluginRegistry) -> PluginRegistry:
    for plugin_class in BUILTIN_PLUGINS:
        registry.register(plugin_class())
    return registry


__all__ = ["BUILTIN_PLUGINS", "ContainerPlugin", "ImagePlugin", "ListPlugin", "TextBlockPlugin", "register_builtins"]
