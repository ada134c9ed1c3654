from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from .config import Settings, get_settings


class Base(DeclarativeBase):
    """Base ORM per tutti i modelli."""
    pass


def make_engine(settings: Settings | None = None) -> AsyncEngine:
    settings = settings or get_settings()
    return create_async_engine(
        settings.database_url,
        echo=settings.sql_echo,  # HEALTHHUB_SQL_ECHO=1 per vedere le query
    )


def make_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=engine,
        autoflush=False,
        expire_on_commit=False,
    )


@asynccontextmanager
async def db_session(factory: async_sessionmaker[AsyncSession]) -> AsyncIterator[AsyncSession]:
    """
    Context manager per gestire correttamente la sessione:
    - commit se tutto ok
    - rollback su eccezioni
    - close sempre
    """
    session: AsyncSession = factory()
    try:
        yield session
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    finally:
        await session.close()


async def create_all(engine: AsyncEngine) -> None:
    """Crea le tabelle se non esistono."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
