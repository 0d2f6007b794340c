"""Test configuration for database unit tests.

This module provides common fixtures for testing the database bootstrap
layer against temporary SQLite files.
"""

from __future__ import annotations

from pathlib import Path
from typing import AsyncGenerator, List, Type

import pytest
from sqlalchemy import Column, Integer, MetaData, String
from sqlalchemy import Table as SATable

from botstore.core.config import DatabaseConfig
from botstore.core.database.database import Database
from botstore.core.database.helpers import DatabaseEngine
from botstore.core.database.interfaces import Table
from botstore.core.database.utils import create_engine


@pytest.fixture(scope="function")
def sqlite_path(tmp_path: Path) -> Path:
    """Path of a not-yet-created SQLite file inside a nested directory."""
    return tmp_path / "data" / "storage" / "core.sqlite"


@pytest.fixture(scope="function")
def sqlite_config(sqlite_path: Path) -> DatabaseConfig:
    """SQLite database configuration pointing at a temporary file."""
    return DatabaseConfig(type="sqlite", location=str(sqlite_path))


@pytest.fixture(scope="function")
async def db_engine(sqlite_config: DatabaseConfig) -> AsyncGenerator[DatabaseEngine, None]:
    """Dialect-aware engine handle on a temporary SQLite file."""
    db = DatabaseEngine(create_engine(sqlite_config))
    try:
        yield db
    finally:
        await db.dispose()


@pytest.fixture(scope="function")
async def database(sqlite_config: DatabaseConfig) -> AsyncGenerator[Database, None]:
    """Initialized database with every configured table bootstrapped."""
    database = Database(sqlite_config)
    await database.initialize()
    try:
        yield database
    finally:
        await database.dispose()


def make_table_descriptor(name: str, calls: List[str]) -> Type[Table]:
    """Build a plain ``Table`` descriptor that records each bootstrap call in ``calls``."""
    sa_table = SATable(
        name,
        MetaData(),
        Column("id", Integer, primary_key=True),
        Column("label", String(64)),
    )

    class RecordingTable(Table):
        async def bootstrap(self) -> bool:
            calls.append(name)
            return await self.db.create_table_if_not_exists(sa_table)

    RecordingTable.name = name
    RecordingTable.__name__ = f"RecordingTable_{name}"
    return RecordingTable


@pytest.fixture(scope="function")
def bootstrap_calls() -> List[str]:
    return []


@pytest.fixture(scope="function")
def table_factory(bootstrap_calls: List[str]):
    """Factory for recording table descriptors sharing ``bootstrap_calls``."""

    def _make(name: str) -> Type[Table]:
        return make_table_descriptor(name, bootstrap_calls)

    return _make
