"""
Dialect-aware connection handle handed to table descriptors.

``DatabaseEngine`` wraps an ``AsyncEngine`` and adds the few operations the
bootstrap layer needs on top of SQLAlchemy's schema API: detecting the
SQLite backend, creating a table only when it is missing, running raw
statements and dropping tables with backend-specific SQL.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, List, Optional

from sqlalchemy import Table, inspect, text
from sqlalchemy.engine import Dialect, Result
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine
from sqlalchemy.sql import functions
from sqlalchemy.sql.elements import ColumnElement


def drop_table_statements(name: str, dialect: Dialect) -> List[str]:
    """SQL statements that drop table ``name`` regardless of dependent rows.

    SQLite has no ``CASCADE`` so foreign key enforcement is switched off around
    the drop instead. The name is always quoted by the dialect.
    """
    quoted = dialect.identifier_preparer.quote_identifier(name)
    if dialect.name == "sqlite":
        return [
            "PRAGMA foreign_keys = OFF;",
            f"DROP TABLE IF EXISTS {quoted};",
            "PRAGMA foreign_keys = ON;",
        ]
    return [f"DROP TABLE IF EXISTS {quoted} CASCADE;"]


class DatabaseEngine:
    """Async engine plus the helpers table descriptors rely on."""

    def __init__(self, engine: AsyncEngine) -> None:
        self.engine = engine

    @property
    def dialect_name(self) -> str:
        return self.engine.dialect.name

    @property
    def is_lite(self) -> bool:
        return self.dialect_name == "sqlite"

    @asynccontextmanager
    async def begin(self) -> AsyncIterator[AsyncConnection]:
        async with self.engine.begin() as conn:
            yield conn

    @asynccontextmanager
    async def connect(self) -> AsyncIterator[AsyncConnection]:
        async with self.engine.connect() as conn:
            yield conn

    async def has_table(self, name: str) -> bool:
        async with self.engine.connect() as conn:
            return await conn.run_sync(lambda sync_conn: inspect(sync_conn).has_table(name))

    async def table_names(self) -> List[str]:
        async with self.engine.connect() as conn:
            return await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())

    async def create_table_if_not_exists(self, table: Table) -> bool:
        """Create ``table`` and its indexes when it does not exist yet.

        Args:
            table: SQLAlchemy table definition

        Returns:
            True if the table was created by this call, False if it already existed
        """
        async with self.engine.begin() as conn:

            def _create(sync_conn) -> bool:
                if inspect(sync_conn).has_table(table.name):
                    return False
                table.create(sync_conn)
                return True

            return await conn.run_sync(_create)

    async def raw(self, sql: str, params: Optional[Dict[str, Any]] = None) -> Result:
        """Execute a literal SQL statement in its own transaction."""
        async with self.engine.begin() as conn:
            return await conn.execute(text(sql), params or {})

    def drop_table_statements(self, name: str) -> List[str]:
        return drop_table_statements(name, self.engine.dialect)

    async def drop_table(self, name: str) -> None:
        """Drop table ``name`` if it exists.

        The statements share a single connection so the SQLite pragma toggle
        applies to the drop it surrounds.
        """
        async with self.engine.begin() as conn:
            for statement in self.drop_table_statements(name):
                await conn.exec_driver_sql(statement)

    def date_now(self) -> ColumnElement:
        """Current timestamp expression understood by both backends."""
        return functions.current_timestamp()

    async def dispose(self) -> None:
        await self.engine.dispose()
