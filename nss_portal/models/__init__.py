from .base import BaseModel
from .storage_entry import StorageEntry

__all__ = ["BaseModel", "StorageEntry"]
