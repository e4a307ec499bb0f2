from .user import user
from .admin_event import admin_event
from .suggestion import suggestion

__all__ = ["user", "admin_event", "suggestion"]
