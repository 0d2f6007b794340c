"""
Ghost file entity models.

Ghost files are bot and server files stored in the database instead of on
disk. ``GhostFile`` holds the current content of each path and
``GhostRevision`` indexes every revision written to a path.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field

from ..base import Base, utc_now_naive


class GhostFile(Base, table=True):
    """Entity for stored file contents.

    Table: srv_ghost_files
    """

    __tablename__ = "srv_ghost_files"

    file_path: str = Field(primary_key=True, max_length=512)
    bot_id: Optional[str] = Field(default=None, max_length=128, index=True)
    content: Optional[bytes] = Field(default=None)
    deleted: bool = Field(default=False)
    modified_on: datetime = Field(default_factory=utc_now_naive, sa_type=DateTime)

    def __repr__(self) -> str:
        return f"GhostFile(file_path={self.file_path}, deleted={self.deleted})"


class GhostRevision(Base, table=True):
    """Entity for the revision index of ghost files.

    Table: srv_ghost_index
    """

    __tablename__ = "srv_ghost_index"

    file_path: str = Field(primary_key=True, max_length=512)
    revision: str = Field(primary_key=True, max_length=64)
    created_by: str = Field(max_length=128)
    created_on: datetime = Field(default_factory=utc_now_naive, sa_type=DateTime)

    def __repr__(self) -> str:
        return f"GhostRevision(file_path={self.file_path}, revision={self.revision})"
