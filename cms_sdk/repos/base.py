"""
Collaborator interfaces consumed by the composition hosts.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class PagesRepository(ABC):
    @abstractmethod
    async def find_by_slug(self, slug: str) -> dict[str, Any] | None:
        """Return the stored Page for ``slug``, or None."""


class PluginsRepository(ABC):
    @abstractmethod
    async def list_active_plugin_ids(self) -> list[str] | None:
        """Return the active plugin ids; None means every plugin is allowed."""
