"""Test configuration for database e2e tests.

This module provides fixtures for exercising the bootstrap layer against a
real PostgreSQL server started with testcontainers. The suite only runs when
``DATABASE__ENABLE_POSTGRES_TESTS=true`` is set for the test settings.
"""

from __future__ import annotations

from test.settings import test_settings
from typing import AsyncGenerator, Generator

import pytest

from botstore.core.config import DatabaseConfig
from botstore.core.database.database import Database


@pytest.fixture(scope="session")
def postgres_container() -> Generator:
    """Start a PostgreSQL container for the whole session."""
    if not test_settings.database.enable_postgres_tests:
        pytest.skip("PostgreSQL e2e tests are disabled")

    from testcontainers.postgres import PostgresContainer

    postgres_config = test_settings.database.postgres
    container = PostgresContainer(
        image=postgres_config.image,
        username=postgres_config.user,
        password=postgres_config.password.get_secret_value(),
        dbname=postgres_config.db,
    )
    container.start()
    try:
        yield container
    finally:
        container.stop()


@pytest.fixture(scope="function")
def postgres_config(postgres_container) -> DatabaseConfig:
    """Database configuration built from discrete connection fields."""
    postgres_config = test_settings.database.postgres
    return DatabaseConfig(
        type="postgres",
        host=postgres_container.get_container_host_ip(),
        port=int(postgres_container.get_exposed_port(5432)),
        user=postgres_config.user,
        password=postgres_config.password.get_secret_value(),
        database=postgres_config.db,
    )


@pytest.fixture(scope="function")
async def postgres_database(postgres_config: DatabaseConfig) -> AsyncGenerator[Database, None]:
    """Initialized database; every table is dropped again after the test."""
    database = Database(postgres_config)
    await database.initialize()
    try:
        yield database
    finally:
        await database.teardown_tables()
        await database.dispose()
