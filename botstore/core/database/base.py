"""
Base database models and utilities.

This module provides the foundational database components used across
all entities in the database layer using SQLModel.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import ConfigDict
from sqlmodel import SQLModel


class Base(SQLModel):
    """Base class for all SQLModel entities."""

    model_config = ConfigDict(arbitrary_types_allowed=True)


def utc_now_naive() -> datetime:
    """Get current UTC datetime without timezone info.

    Columns are ``TIMESTAMP WITHOUT TIME ZONE`` on Postgres, which rejects
    timezone-aware values.
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)
