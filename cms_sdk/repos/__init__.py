from .base import PagesRepository, PluginsRepository
from .pages_memory import InMemoryPagesRepository
from .plugins_file import FilePluginsRepository

__all__ = ["FilePluginsRepository", "InMemoryPagesRepository", "PagesRepository", "PluginsRepository"]
