"""
CMS Plugin System

Public API for the plugin system:
    PluginMetadata    — registration metadata dataclass
    Plugin            — abstract base class for render plugins
    FunctionPlugin    — plugin built from a bare render callable
    RenderArgs        — argument passed to Plugin.render()
    PluginRegistry    — registry, allowlist and params validation
    register_builtins — registers Container, TextBlock, Image, List
"""

from .base import FunctionPlugin, Plugin, PluginMetadata, RenderArgs
from .builtins import register_builtins
from .registry import PluginRegistry, Registration

__all__ = [
    "FunctionPlugin",
    "Plugin",
    "PluginMetadata",
    "PluginRegistry",
    "Registration",
    "RenderArgs",
    "register_builtins",
]
