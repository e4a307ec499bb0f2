# File: nss_portal/models/storage_entry.py
from sqlalchemy import Column, String, Text
from nss_portal.models.base import BaseModel


class StorageEntry(BaseModel):
    """One named JSON document, the durable counterpart of a browser storage slot."""

    __tablename__ = "storage_entries"

    key = Column(String(255), primary_key=True)
    value = Column(Text, nullable=False)
