# File: nss_portal/storage/sql_store.py
import logging
from typing import Dict, Optional
from sqlalchemy.exc import SQLAlchemyError
from nss_portal.core.exceptions import StorageError
from nss_portal.db.database import init_db, make_engine, make_session_factory
from nss_portal.models.storage_entry import StorageEntry
from nss_portal.storage.base import KeyValueStore

logger = logging.getLogger(__name__)


class SQLAlchemyStore(KeyValueStore):
    """Key-value store backed by the ``storage_entries`` table."""

    def __init__(self, database_url: str = None, engine=None, create_tables: bool = True):
        self.engine = engine if engine is not None else make_engine(database_url)
        self.SessionLocal = make_session_factory(self.engine)
        if create_tables:
            init_db(self.engine)

    def load(self, key: str) -> Optional[bytes]:
        db = self.SessionLocal()
        try:
            entry = db.get(StorageEntry, key)
            if entry is None:
                return None
            return entry.value.encode("utf-8")
        finally:
            db.close()

    def save(self, key: str, raw: bytes) -> None:
        self.save_many({key: raw})

    def save_many(self, documents: Dict[str, bytes]) -> None:
        db = self.SessionLocal()
        current_key = None
        try:
            for key, raw in documents.items():
                current_key = key
                value = raw.decode("utf-8") if isinstance(raw, bytes) else raw
                entry = db.get(StorageEntry, key)
                if entry is None:
                    db.add(StorageEntry(key=key, value=value))
                else:
                    entry.value = value
            db.commit()
            logger.debug(f"Stored {len(documents)} document(s): {', '.join(documents)}")
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Storage write failed for {current_key}: {str(e)}")
            raise StorageError(current_key, str(e)) from e
        finally:
            db.close()

    def keys(self):
        db = self.SessionLocal()
        try:
            return [row[0] for row in db.query(StorageEntry.key).order_by(StorageEntry.key).all()]
        finally:
            db.close()
