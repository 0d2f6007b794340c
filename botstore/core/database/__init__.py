"""
Database layer for botstore.

Structure:
- entities/: SQLModel entity models, one module per concern
- tables/: Table descriptors and the ordered ``ALL_TABLES`` list
- interfaces.py: ``Table`` and ``ModelTable`` descriptor base classes
- helpers.py: ``DatabaseEngine``, the dialect-aware connection handle
- database.py: ``Database``, bootstrap and teardown of all tables
- utils.py: Engine and session factory construction from configuration
- errors.py: Exceptions raised by the bootstrap layer
"""

from .base import Base
from .database import Database
from .errors import DatabaseError, DatabaseNotInitializedError, DuplicateTableError
from .helpers import DatabaseEngine, drop_table_statements
from .interfaces import ModelTable, Table
from .tables import ALL_TABLES
from .utils import (
    build_database_url,
    create_engine,
    create_sessionmaker,
    sanitize_url_for_log,
)

__all__ = [
    "ALL_TABLES",
    "Base",
    "Database",
    "DatabaseEngine",
    "DatabaseError",
    "DatabaseNotInitializedError",
    "DuplicateTableError",
    "ModelTable",
    "Table",
    "build_database_url",
    "create_engine",
    "create_sessionmaker",
    "drop_table_statements",
    "sanitize_url_for_log",
]
