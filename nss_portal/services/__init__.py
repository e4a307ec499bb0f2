from .portal import PortalService

__all__ = ["PortalService"]
