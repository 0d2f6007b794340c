"""
Channel user entity models.

A channel user is the identity of an end user on one messaging channel.
The pair (channel, user_id) is unique.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict

from sqlalchemy import DateTime
from sqlmodel import JSON, Field

from ..base import Base, utc_now_naive


class ChannelUser(Base, table=True):
    """Entity for channel users.

    Table: srv_channel_users
    """

    __tablename__ = "srv_channel_users"

    channel: str = Field(primary_key=True, max_length=64)
    user_id: str = Field(primary_key=True, max_length=128)
    attributes: Dict[str, Any] = Field(default_factory=dict, sa_type=JSON)

    created_at: datetime = Field(default_factory=utc_now_naive, sa_type=DateTime)
    updated_at: datetime = Field(default_factory=utc_now_naive, sa_column_kwargs={"onupdate": utc_now_naive}, sa_type=DateTime)

    def __repr__(self) -> str:
        return f"ChannelUser(channel={self.channel}, user_id={self.user_id})"
