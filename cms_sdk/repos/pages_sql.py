"""
SQL-backed pages repository (SQLAlchemy async sessions).

Pages are validated on the way out so a bad row fails loudly instead of
reaching the pipeline.
"""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from cms_sdk.models.page import PageRecord
from cms_sdk.repos.base import PagesRepository
from cms_sdk.validation.validator import validate_page

logger = logging.getLogger(__name__)


class SqlPagesRepository(PagesRepository):
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def find_by_slug(self, slug: str) -> dict[str, Any] | None:
        async with self._session_factory() as session:
            result = await session.execute(select(PageRecord).where(PageRecord.slug == slug))
            record = result.scalars().first()
        if record is None:
            return None
        page = record.to_page()
        validate_page(page)
        return page

    async def save(self, page: dict[str, Any]) -> None:
        """Insert or replace the page stored under ``meta.slug``."""
        validate_page(page)
        slug = page["meta"].get("slug")
        if not slug:
            raise ValueError("Page meta.slug is required to store a page")

        async with self._session_factory() as session:
            result = await session.execute(select(PageRecord).where(PageRecord.slug == slug))
            record = result.scalars().first()
            if record is None:
                record = PageRecord(slug=slug)
                session.add(record)
            record.version = page["version"]
            record.meta = page["meta"]
            record.root = page["root"]
            await session.commit()
        logger.info("Stored page %s", slug)
