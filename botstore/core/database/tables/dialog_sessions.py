from __future__ import annotations

from ..entities.dialog_sessions import DialogSession
from ..interfaces import ModelTable


class DialogSessionTable(ModelTable):
    model = DialogSession
