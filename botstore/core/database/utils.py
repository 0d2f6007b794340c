"""
Database utility functions for engine and session management.

This module provides the core utility functions for turning a
``DatabaseConfig`` into an async SQLAlchemy engine and session factory.

Functions:
- build_database_url: Resolves the async driver URL for the selected backend
- build_connect_args: Driver-level connection arguments (SSL for Postgres)
- create_engine: Creates async SQLAlchemy engine with backend-specific setup
- create_sessionmaker: Creates async session factory with safe defaults
- sanitize_url_for_log: Redacts credentials from a URL before logging
"""

from __future__ import annotations

import os
import re
from typing import Any, Dict

from sqlalchemy import event
from sqlalchemy.engine import URL, make_url
from sqlalchemy.exc import ArgumentError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from botstore.core.config import DatabaseConfig
from botstore.core.logging_config import get_logger

logger = get_logger(__name__)

POSTGRES_DRIVER = "postgresql+asyncpg"
SQLITE_DRIVER = "sqlite+aiosqlite"
MEMORY_LOCATION = ":memory:"


def build_database_url(config: DatabaseConfig) -> str:
    """Build the async driver URL for ``config``.

    For Postgres an explicit ``url`` wins and is normalized to the asyncpg driver,
    for example ``postgres://`` and ``postgresql+psycopg://`` both become
    ``postgresql+asyncpg://``. Otherwise the URL is composed from the discrete
    connection fields. SQLite resolves ``location`` to an absolute path.

    Args:
        config: Database configuration

    Returns:
        SQLAlchemy URL string using an async driver
    """
    if config.is_postgres:
        if config.url:
            return re.sub(r"^postgres(?:ql)?(?:\+[a-z0-9_]+)?://", f"{POSTGRES_DRIVER}://", config.url, count=1)
        url = URL.create(
            POSTGRES_DRIVER,
            username=config.user,
            password=config.password.get_secret_value() or None,
            host=config.host,
            port=config.port,
            database=config.database,
        )
        return url.render_as_string(hide_password=False)

    if config.location == MEMORY_LOCATION:
        return f"{SQLITE_DRIVER}:///{MEMORY_LOCATION}"
    return f"{SQLITE_DRIVER}:///{os.path.abspath(config.location)}"


def build_connect_args(config: DatabaseConfig) -> Dict[str, Any]:
    """Driver connection arguments for ``config``."""
    if config.is_postgres and config.ssl:
        return {"ssl": True}
    return {}


def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    # Foreign key enforcement is a per-connection pragma in SQLite.
    cursor = dbapi_connection.cursor()
    try:
        cursor.execute("PRAGMA foreign_keys = ON")
    finally:
        cursor.close()


def create_engine(config: DatabaseConfig) -> AsyncEngine:
    """Create an async SQLAlchemy engine for ``config``.

    SQLite engines get their parent directory created on demand and turn on
    foreign key enforcement for every new connection.

    Args:
        config: Database configuration

    Returns:
        Configured AsyncEngine instance
    """
    if not config.is_postgres and config.type.lower() != "sqlite":
        logger.warning(f"Unknown database type '{config.type}', falling back to sqlite")

    url = build_database_url(config)
    logger.info(f"Opening {'postgres' if config.is_postgres else 'sqlite'} database at {sanitize_url_for_log(url)}")

    if config.is_postgres:
        return create_async_engine(url, pool_pre_ping=True, connect_args=build_connect_args(config))

    if config.location != MEMORY_LOCATION:
        parent = os.path.dirname(os.path.abspath(config.location))
        os.makedirs(parent, exist_ok=True)

    engine = create_async_engine(url)
    event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create an ``async_sessionmaker`` with safe defaults for this project.

    Args:
        engine: Async SQLAlchemy engine

    Returns:
        Configured async session factory
    """
    return async_sessionmaker(engine, expire_on_commit=False)


def sanitize_url_for_log(url: str) -> str:
    """Sanitize URL for logging by redacting the password."""
    try:
        return make_url(url).render_as_string(hide_password=True)
    except ArgumentError:
        return "***"
