# File: nss_portal/core/exceptions.py


class PortalError(Exception):
    """Base class for every error raised by the portal core."""


class NotFoundError(PortalError):
    def __init__(self, entity: str, identifier: str):
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity} not found: {identifier}")


class ConflictError(PortalError):
    def __init__(self, message: str, field: str = None, value: str = None):
        self.field = field
        self.value = value
        super().__init__(message)


class AuthenticationError(PortalError):
    pass


class StorageError(PortalError):
    def __init__(self, key: str, message: str):
        self.key = key
        super().__init__(f"Failed to write '{key}': {message}")
