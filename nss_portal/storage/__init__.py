from .base import KeyValueStore
from .memory_store import MemoryStore
from .sql_store import SQLAlchemyStore

__all__ = ["KeyValueStore", "MemoryStore", "SQLAlchemyStore"]
