"""
Table descriptors.

``ALL_TABLES`` is the ordered list bootstrapped by ``Database``. Tables are
created and dropped one at a time in this order.
"""

from typing import List, Type

from ..interfaces import Table
from .channel_users import ChannelUsersTable
from .dialog_sessions import DialogSessionTable
from .ghost import GhostFilesTable, GhostRevisionsTable
from .kvs import KeyValueStoreTable
from .server import LogsTable, NotificationsTable, ServerMetadataTable

ALL_TABLES: List[Type[Table]] = [
    ServerMetadataTable,
    ChannelUsersTable,
    KeyValueStoreTable,
    DialogSessionTable,
    LogsTable,
    NotificationsTable,
    GhostFilesTable,
    GhostRevisionsTable,
]

__all__ = [
    "ALL_TABLES",
    "ChannelUsersTable",
    "DialogSessionTable",
    "GhostFilesTable",
    "GhostRevisionsTable",
    "KeyValueStoreTable",
    "LogsTable",
    "NotificationsTable",
    "ServerMetadataTable",
]
