"""
Server-wide entity models.

This module contains the entities that belong to the server itself rather
than to a single bot: the installation metadata record, the log stream and
the notifications shown in the admin UI.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field

from ..base import Base, utc_now_naive


class ServerMetadata(Base, table=True):
    """Entity for the installation metadata record.

    One row is written when the table is first created and records which
    server version created the database.

    Table: srv_metadata
    """

    __tablename__ = "srv_metadata"

    id: Optional[int] = Field(default=None, primary_key=True)
    server_version: str = Field(max_length=32)
    installed_on: datetime = Field(default_factory=utc_now_naive, sa_type=DateTime)

    def __repr__(self) -> str:
        return f"ServerMetadata(server_version={self.server_version}, installed_on={self.installed_on})"


class BotLog(Base, table=True):
    """Entity for bot log lines.

    Table: srv_logs
    """

    __tablename__ = "srv_logs"

    id: Optional[int] = Field(default=None, primary_key=True)
    bot_id: Optional[str] = Field(default=None, max_length=128, index=True)
    hostname: Optional[str] = Field(default=None, max_length=255)
    level: str = Field(max_length=16)
    scope: Optional[str] = Field(default=None, max_length=128)
    message: str
    meta: Optional[str] = Field(default=None, description="Serialized structured context")
    timestamp: datetime = Field(default_factory=utc_now_naive, index=True, sa_type=DateTime)

    def __repr__(self) -> str:
        return f"BotLog(id={self.id}, bot_id={self.bot_id}, level={self.level})"


class Notification(Base, table=True):
    """Entity for admin UI notifications.

    Table: srv_notifications
    """

    __tablename__ = "srv_notifications"

    id: Optional[int] = Field(default=None, primary_key=True)
    bot_id: Optional[str] = Field(default=None, max_length=128, index=True)
    message: str
    level: str = Field(default="info", max_length=16)
    redirect_url: Optional[str] = Field(default=None, max_length=512)
    created_on: datetime = Field(default_factory=utc_now_naive, sa_type=DateTime)
    read: bool = Field(default=False)
    archived: bool = Field(default=False)

    def __repr__(self) -> str:
        return f"Notification(id={self.id}, level={self.level}, read={self.read})"
