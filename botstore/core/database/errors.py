"""Error types for the database package.

Connection and SQL failures raised by SQLAlchemy and the drivers are not wrapped;
these exceptions only cover misuse of the bootstrap layer itself.
"""

from __future__ import annotations


class DatabaseError(Exception):
    """Base error for all botstore database exceptions."""


class DuplicateTableError(DatabaseError):
    """Raised when two table descriptors declare the same table name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Table '{name}' is declared more than once")
        self.name = name


class DatabaseNotInitializedError(DatabaseError):
    """Raised when the connection is needed before ``Database.initialize()`` ran."""

    def __init__(self) -> None:
        super().__init__("Database is not initialized; call initialize() first")
