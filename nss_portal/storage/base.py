# File: nss_portal/storage/base.py
from typing import Dict, Optional


class KeyValueStore:
    """Durable storage of named raw documents.

    No schema validation and no locking. ``save_many`` is the only
    multi-key write; backends that have transactions make it atomic.
    """

    def load(self, key: str) -> Optional[bytes]:
        raise NotImplementedError

    def save(self, key: str, raw: bytes) -> None:
        raise NotImplementedError

    def save_many(self, documents: Dict[str, bytes]) -> None:
        for key, raw in documents.items():
            self.save(key, raw)

    def keys(self):
        raise NotImplementedError
