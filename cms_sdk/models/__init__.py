from .page import PageRecord
from .plugin_definition import PluginDefinition

__all__ = ["PageRecord", "PluginDefinition"]
