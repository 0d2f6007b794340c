"""
Database entity models.

This package contains all database entity models organized by business domain.
Each module represents either a single table or a small group of tables that
belong to the same concern.

Modules:
- server: Installation metadata, bot logs and notifications
- channel_users: End users per messaging channel
- kvs: Per-bot key/value store
- dialog_sessions: Conversation state per user
- ghost: Stored file contents and their revision index
"""

from .channel_users import ChannelUser
from .dialog_sessions import DialogSession
from .ghost import GhostFile, GhostRevision
from .kvs import KeyValue
from .server import BotLog, Notification, ServerMetadata

__all__ = [
    "BotLog",
    "ChannelUser",
    "DialogSession",
    "GhostFile",
    "GhostRevision",
    "KeyValue",
    "Notification",
    "ServerMetadata",
]
