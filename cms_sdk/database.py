"""
Async SQLAlchemy plumbing for the sql page/plugin repositories.

Engines and session factories are built on demand and owned by the IoC
container (see cms_sdk.bootstrap), never created at import time.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

logger = logging.getLogger(__name__)

Base = declarative_base()


def build_engine(database_url: str, echo: bool = False, **kwargs) -> AsyncEngine:
    logger.info("Creating database engine for %s", database_url.split("@")[-1])
    return create_async_engine(database_url, echo=echo, **kwargs)


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def init_models(engine: AsyncEngine) -> None:
    """Create missing tables. Alembic migrations remain the production path."""
    # models must be imported so their tables are attached to Base.metadata
    import cms_sdk.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
