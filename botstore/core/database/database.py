"""
Database bootstrap and teardown.

``Database`` opens the connection described by a ``DatabaseConfig`` and makes
sure every table in its descriptor list exists. Descriptors are processed one
at a time in declared order; each step completes before the next starts.
Connection and SQL errors propagate unchanged to the caller.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, List, Optional, Sequence, Type

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from botstore.core.config import DatabaseConfig
from botstore.core.logging_config import get_logger

from .errors import DatabaseNotInitializedError, DuplicateTableError
from .helpers import DatabaseEngine
from .interfaces import Table
from .tables import ALL_TABLES
from .utils import create_engine, create_sessionmaker

logger = get_logger(__name__)


class Database:
    """Owns the connection handle and the lifecycle of the configured tables."""

    def __init__(self, config: DatabaseConfig, tables: Optional[Sequence[Type[Table]]] = None) -> None:
        """Validate the descriptor list without opening a connection.

        Args:
            config: Database configuration
            tables: Ordered table descriptor classes, defaults to ``ALL_TABLES``

        Raises:
            DuplicateTableError: Two descriptors declare the same table name
        """
        self.config = config
        self.table_classes: List[Type[Table]] = list(ALL_TABLES if tables is None else tables)
        self.tables: List[Table] = []
        self._db: Optional[DatabaseEngine] = None
        self._session_maker: Optional[async_sessionmaker[AsyncSession]] = None

        seen = set()
        for table_cls in self.table_classes:
            if table_cls.name in seen:
                raise DuplicateTableError(table_cls.name)
            seen.add(table_cls.name)

    @property
    def db(self) -> DatabaseEngine:
        if self._db is None:
            raise DatabaseNotInitializedError()
        return self._db

    @property
    def is_initialized(self) -> bool:
        return self._db is not None

    @property
    def table_names(self) -> List[str]:
        return [table_cls.name for table_cls in self.table_classes]

    async def initialize(self) -> None:
        """Open the connection (once) and bootstrap every table."""
        if self._db is None:
            engine = create_engine(self.config)
            self._db = DatabaseEngine(engine)
            self._session_maker = create_sessionmaker(engine)
        await self.bootstrap()

    async def bootstrap(self) -> List[str]:
        """Ensure every configured table exists.

        Returns:
            Names of the tables created by this call, in creation order
        """
        db = self.db
        tables: List[Table] = []
        created_names: List[str] = []
        for table_cls in self.table_classes:
            table = table_cls(db)
            created = await table.bootstrap()
            if created:
                logger.debug(f"Created table '{table.name}'")
                created_names.append(table.name)
            tables.append(table)
        self.tables = tables
        return created_names

    async def teardown_tables(self) -> None:
        """Drop every configured table, one at a time in declared order."""
        db = self.db
        for table_cls in self.table_classes:
            await db.drop_table(table_cls.name)
            logger.debug(f"Dropped table '{table_cls.name}'")
        self.tables = []

    def run_migrations(self) -> None:
        """Migration entrypoint.

        Schema versioning is not implemented; tables are only created when absent.
        """
        logger.info("Database migrations are not implemented, skipping")

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        if self._session_maker is None:
            raise DatabaseNotInitializedError()
        async with self._session_maker() as session:
            yield session

    async def dispose(self) -> None:
        """Close the connection pool. The instance can be initialized again afterwards."""
        if self._db is not None:
            await self._db.dispose()
        self._db = None
        self._session_maker = None
        self.tables = []
