"""Database connection and session management.

Provides async database engine and session factory, and the translation of
driver failures into domain errors at the repository boundary.
"""

from contextlib import contextmanager
from typing import Iterator

import logfire
from sqlalchemy import event
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from microblog.config import Settings
from microblog.domain.error import StoreUnavailableError


def create_engine(settings: Settings) -> AsyncEngine:
    """Create async database engine.

    Args:
        settings: Application settings with database URL

    Returns:
        Configured async engine
    """
    if settings.database_url.startswith("sqlite"):
        return _create_sqlite_engine(settings)

    return create_async_engine(
        settings.database_url,
        echo=settings.debug,  # Log SQL queries in debug mode
        pool_pre_ping=True,  # Verify connections before using
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory.

    Args:
        engine: Database engine

    Returns:
        Session factory for creating database sessions
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,  # Don't expire objects after commit
        autoflush=False,  # Manual flushing for better control
    )


@contextmanager
def translate_store_errors() -> Iterator[None]:
    """Convert driver failures raised inside the block to StoreUnavailableError.

    Raises:
        StoreUnavailableError: If the database raised a DBAPI error
    """
    try:
        yield
    except DBAPIError as e:
        logfire.error("Database operation failed", error=str(e.orig or e))
        raise StoreUnavailableError("The data store is unavailable") from e


def _create_sqlite_engine(settings: Settings) -> AsyncEngine:
    """Create an engine for SQLite (local development and tests).

    The driver's own transaction handling is disabled and BEGIN IMMEDIATE is
    emitted explicitly, so SAVEPOINTs nest inside the request transaction and
    concurrent transactions wait on the busy timeout.
    """
    engine = create_async_engine(settings.database_url, echo=settings.debug)

    @event.listens_for(engine.sync_engine, "connect")
    def _disable_driver_begin(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def _emit_begin(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")

    return engine
