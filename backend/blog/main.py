"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import func, select
from sqlalchemy.engine import make_url

from blog.config import get_settings
from blog.infrastructure.database import Base, engine
from blog.infrastructure.database.models import CategoryModel
from blog.infrastructure.database.session import async_session_factory
from blog.infrastructure.logging.log_config import setup_logging
from blog.presentation.api.errors import register_exception_handlers
from blog.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


async def _ensure_database_exists() -> None:
    """Create the PostgreSQL database if it does not yet exist.

    Connects to the default ``postgres`` maintenance database, checks for the
    target database name, and issues ``CREATE DATABASE`` when missing.
    Other backends (SQLite) create their files on first connect.
    """
    settings = get_settings()
    if not settings.database_url.startswith("postgresql"):
        return

    import asyncpg

    url = make_url(settings.database_url).set(drivername="postgresql")
    db_name = url.database
    if not db_name:
        return

    maintenance_url = url.set(database="postgres").render_as_string(hide_password=False)
    try:
        conn = await asyncpg.connect(maintenance_url)
        try:
            exists = await conn.fetchval(
                "SELECT 1 FROM pg_database WHERE datname = $1", db_name
            )
            if not exists:
                # CREATE DATABASE cannot run inside a transaction block
                await conn.execute(f'CREATE DATABASE "{db_name}"')
                logger.info("Created database '%s'", db_name)
        finally:
            await conn.close()
    except Exception as exc:
        logger.warning("Could not auto-create database '%s': %s", db_name, exc)


async def _seed_default_categories() -> None:
    """Insert the configured categories when the table is still empty."""
    settings = get_settings()
    try:
        async with async_session_factory() as session:
            count = await session.scalar(select(func.count()).select_from(CategoryModel))
            if count:
                logger.debug("Categories already present (%d)", count)
                return
            session.add_all(CategoryModel(name=name) for name in settings.default_categories)
            await session.commit()
            logger.info("Seeded %d default categories", len(settings.default_categories))
    except Exception as exc:
        logger.warning("Could not seed default categories: %s", exc)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: create tables and seed reference data."""
    setup_logging()

    await _ensure_database_exists()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    await _seed_default_categories()

    yield

    await engine.dispose()


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "blog.main:app",
        host="0.0.0.0",
        port=3000,
        reload=True,
    )
