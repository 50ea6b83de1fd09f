from __future__ import annotations

from typing import AsyncIterator, Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from .config import get_settings

# Built on first use so importing the package never needs a configured database.
_session_factory: Optional[async_sessionmaker[AsyncSession]] = None


def _get_session_factory() -> async_sessionmaker[AsyncSession]:
    global _session_factory
    if _session_factory is None:
        settings = get_settings()
        engine = create_async_engine(
            settings.async_database_url,
            echo=settings.SQL_ECHO,
            pool_pre_ping=True,
        )
        _session_factory = async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
    return _session_factory


# PUBLIC_INTERFACE
async def get_async_session() -> AsyncIterator[AsyncSession]:
    """
    FastAPI dependency yielding one AsyncSession per request.

    The repository and service built for the request share this session.
    """
    async with _get_session_factory()() as session:
        yield session
