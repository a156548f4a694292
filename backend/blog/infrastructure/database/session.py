"""Async engine and per-request sessions.

The configured URL may be written in its sync form
(``sqlite:///./blog.db``, ``postgresql://...``); the matching async
driver is substituted here.
"""

from collections.abc import AsyncGenerator

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from blog.config import get_settings

_ASYNC_DRIVERS = {
    "sqlite": "sqlite+aiosqlite",
    "postgresql": "postgresql+asyncpg",
}


def _get_async_url(url: str) -> str:
    """Swap a bare backend name for its async driver; explicit drivers are kept."""
    parsed = make_url(url)
    driver = _ASYNC_DRIVERS.get(parsed.drivername)
    if driver is None:
        return url
    return parsed.set(drivername=driver).render_as_string(hide_password=False)


def build_engine(url: str) -> AsyncEngine:
    async_url = _get_async_url(url)
    # SQL statements are logged through the "sqlalchemy.engine" logger (LOG_LEVEL_SQL)
    return create_async_engine(async_url, future=True)


engine = build_engine(get_settings().database_url)

async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency: one session per request, committed on success."""
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
