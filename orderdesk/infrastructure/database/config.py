"""
Database configuration.

Manages engine creation, the session factory and table creation.
"""
import logging
from typing import Optional

from sqlalchemy import event, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from orderdesk.settings import DatabaseSettings, get_app_settings

logger = logging.getLogger(__name__)


# =============================================================================
# ENGINE CREATION
# =============================================================================

def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(database_url: str, settings: Optional[DatabaseSettings] = None) -> AsyncEngine:
    """
    Create async SQLAlchemy engine.

    SQLite engines get foreign key enforcement; an in-memory SQLite URL
    shares one connection through StaticPool.

    Args:
        database_url: SQLAlchemy async URL
        settings: Pool settings (ignored for SQLite)

    Returns:
        Configured async engine
    """
    settings = settings or DatabaseSettings()
    url = make_url(database_url)

    if url.get_backend_name() == "sqlite":
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool
        engine = create_async_engine(url, echo=settings.echo_sql, **kwargs)
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    return create_async_engine(
        url,
        echo=settings.echo_sql,
        pool_size=settings.pool_size,
        max_overflow=settings.max_overflow,
        pool_timeout=settings.pool_timeout,
        pool_recycle=settings.pool_recycle,
        pool_pre_ping=True,  # Test connections before using
    )


# Global engine instance
_engine: Optional[AsyncEngine] = None
_session_factory: Optional[async_sessionmaker[AsyncSession]] = None


def get_engine() -> AsyncEngine:
    """
    Get or create global engine instance.

    Returns:
        Global async engine
    """
    global _engine

    if _engine is None:
        settings = get_app_settings().database
        safe_url = make_url(settings.database_url).render_as_string(hide_password=True)
        logger.info(f"Creating database engine: {safe_url}")
        _engine = build_engine(settings.database_url, settings)

    return _engine


# =============================================================================
# SESSION FACTORY
# =============================================================================

def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """
    Get session factory bound to the global engine.

    Returns:
        async_sessionmaker for creating sessions
    """
    global _session_factory

    if _session_factory is None:
        _session_factory = async_sessionmaker(
            bind=get_engine(),
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )
    return _session_factory


# =============================================================================
# DATABASE INITIALIZATION
# =============================================================================

async def init_database(engine: Optional[AsyncEngine] = None) -> None:
    """
    Initialize database.

    Creates all tables if they don't exist.
    """
    from orderdesk.data.models import Base

    logger.info("Initializing database...")

    engine = engine or get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("✅ Database initialized successfully")


async def check_database(engine: Optional[AsyncEngine] = None) -> bool:
    """Run a trivial query; False if the store is unreachable."""
    engine = engine or get_engine()
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True
    except (SQLAlchemyError, OSError) as e:
        logger.warning(f"Database check failed: {e}")
        return False


async def close_database() -> None:
    """Close database connections."""
    global _engine, _session_factory

    if _engine is not None:
        logger.info("Closing database connections...")
        await _engine.dispose()
        logger.info("✅ Database connections closed")

    _engine = None
    _session_factory = None
