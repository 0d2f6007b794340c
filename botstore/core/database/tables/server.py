"""Descriptors for the server-wide tables."""

from __future__ import annotations

from sqlalchemy import insert

from botstore import __version__

from ..base import utc_now_naive
from ..entities.server import BotLog, Notification, ServerMetadata
from ..interfaces import ModelTable


class ServerMetadataTable(ModelTable):
    model = ServerMetadata

    async def after_create(self) -> None:
        # Seeded once, so the row records the version that created the database.
        async with self.db.begin() as conn:
            await conn.execute(
                insert(ServerMetadata.__table__).values(
                    server_version=__version__,
                    installed_on=utc_now_naive(),
                )
            )


class LogsTable(ModelTable):
    model = BotLog


class NotificationsTable(ModelTable):
    model = Notification
