# File: nss_portal/schemas/event.py
from typing import Optional, Tuple
from nss_portal.schemas.base import PortalSchema


class EventRegistration(PortalSchema):
    user_id: str
    user_roll_number: str
    user_name: str
    registered_at: int
    is_approved: bool = False
    approved_by: Optional[str] = None
    approved_at: Optional[int] = None


class AdminEvent(PortalSchema):
    id: str
    title: str
    description: str = ""
    date: str
    # Empty until saved; save_admin_event falls back to ``date``
    start_date: str = ""
    end_date: str = ""
    registrations: Tuple[EventRegistration, ...] = ()
    timestamp: int = 0

    def get_registration(self, user_id: str) -> Optional[EventRegistration]:
        return next((r for r in self.registrations if r.user_id == user_id), None)
