"""
SQL-backed plugin definitions repository.
"""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from cms_sdk.models.plugin_definition import PluginDefinition
from cms_sdk.repos.base import PluginsRepository

logger = logging.getLogger(__name__)


class SqlPluginsRepository(PluginsRepository):
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def list_active_plugin_ids(self) -> list[str]:
        """Active ids in id order. An empty table allows nothing."""
        async with self._session_factory() as session:
            result = await session.execute(
                select(PluginDefinition.id).where(PluginDefinition.active.is_(True)).order_by(PluginDefinition.id)
            )
            ids = list(result.scalars().all())
        if not ids:
            logger.warning("No active plugin definitions; every plugin type will be rejected")
        return ids

    async def set_active(self, plugin_id: str, active: bool = True) -> None:
        async with self._session_factory() as session:
            definition = await session.get(PluginDefinition, plugin_id)
            if definition is None:
                definition = PluginDefinition(id=plugin_id)
                session.add(definition)
            definition.active = active
            await session.commit()
