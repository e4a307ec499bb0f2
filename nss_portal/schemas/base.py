# File: nss_portal/schemas/base.py
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class PortalSchema(BaseModel):
    """Immutable record persisted with camelCase keys (``fullName``, ``isApproved``...)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        # keys this package does not model are kept and written back
        extra="allow",
    )
