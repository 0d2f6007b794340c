"""Key/value store entity, scoped per bot."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import DateTime
from sqlmodel import JSON, Field

from ..base import Base, utc_now_naive


class KeyValue(Base, table=True):
    """Entity for the per-bot key/value store.

    Table: srv_kvs
    """

    __tablename__ = "srv_kvs"

    bot_id: str = Field(primary_key=True, max_length=128)
    key: str = Field(primary_key=True, max_length=255)
    value: Any = Field(default=None, sa_type=JSON)
    modified_on: datetime = Field(default_factory=utc_now_naive, sa_column_kwargs={"onupdate": utc_now_naive}, sa_type=DateTime)
