from __future__ import annotations

from ..entities.kvs import KeyValue
from ..interfaces import ModelTable


class KeyValueStoreTable(ModelTable):
    model = KeyValue
