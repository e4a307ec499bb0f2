# File: nss_portal/storage/memory_store.py
from typing import Dict, Optional
from nss_portal.storage.base import KeyValueStore


class MemoryStore(KeyValueStore):
    def __init__(self, initial: Dict[str, bytes] = None):
        self._data: Dict[str, bytes] = dict(initial or {})
        self.write_count = 0

    def load(self, key: str) -> Optional[bytes]:
        return self._data.get(key)

    def save(self, key: str, raw: bytes) -> None:
        self._data[key] = bytes(raw)
        self.write_count += 1

    def keys(self):
        return sorted(self._data)
