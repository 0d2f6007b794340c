from __future__ import annotations

from ..entities.channel_users import ChannelUser
from ..interfaces import ModelTable


class ChannelUsersTable(ModelTable):
    model = ChannelUser
