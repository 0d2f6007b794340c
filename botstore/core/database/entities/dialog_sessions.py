"""
Dialog session entity models.

A dialog session holds the conversation state of one user with one bot.
The context and the session data expire independently.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from sqlalchemy import DateTime
from sqlmodel import JSON, Field

from ..base import Base, utc_now_naive


class DialogSession(Base, table=True):
    """Entity for dialog sessions.

    Table: dialog_sessions
    """

    __tablename__ = "dialog_sessions"

    id: str = Field(primary_key=True, max_length=255)

    # Conversation state
    context: Dict[str, Any] = Field(default_factory=dict, sa_type=JSON)
    temp_data: Dict[str, Any] = Field(default_factory=dict, sa_type=JSON)
    session_data: Dict[str, Any] = Field(default_factory=dict, sa_type=JSON)

    # Expiry
    context_expiry: Optional[datetime] = Field(default=None, index=True, sa_type=DateTime)
    session_expiry: Optional[datetime] = Field(default=None, index=True, sa_type=DateTime)

    # Timestamps
    created_on: datetime = Field(default_factory=utc_now_naive, sa_type=DateTime)
    modified_on: datetime = Field(default_factory=utc_now_naive, sa_column_kwargs={"onupdate": utc_now_naive}, sa_type=DateTime)

    def __repr__(self) -> str:
        return f"DialogSession(id={self.id}, session_expiry={self.session_expiry})"
