# File: nss_portal/crud/admin_event.py
from typing import Tuple
from nss_portal.core.exceptions import ConflictError, NotFoundError
from nss_portal.crud.base import CRUDCollection
from nss_portal.schemas.event import AdminEvent, EventRegistration
from nss_portal.schemas.user import EventHistory, EventHistoryStatus, User

AdminEvents = Tuple[AdminEvent, ...]


class CRUDAdminEvent(CRUDCollection[AdminEvent]):

    def create(self, events: AdminEvents, *, obj_in: AdminEvent) -> Tuple[AdminEvents, AdminEvent]:
        if self.get(events, obj_in.id):
            raise ConflictError(f"Event id {obj_in.id} already exists", field="id", value=obj_in.id)
        db_obj = obj_in.model_copy(update={
            "start_date": obj_in.start_date or obj_in.date,
            "end_date": obj_in.end_date or obj_in.date,
        })
        return self.append(events, db_obj), db_obj

    def add_registration(
        self, events: AdminEvents, *, event_id: str, registration: EventRegistration
    ) -> AdminEvents:
        return self.apply(events, event_id, lambda e: e.model_copy(update={
            "registrations": e.registrations + (registration,),
        }))

    def approve_registration(
        self, events: AdminEvents, *, event_id: str, user_id: str, approved_by: str, now_ms: int
    ) -> AdminEvents:
        event = self.get_or_raise(events, event_id)
        if event.get_registration(user_id) is None:
            raise NotFoundError("EventRegistration", f"{event_id}/{user_id}")

        def approve(e: AdminEvent) -> AdminEvent:
            return e.model_copy(update={
                "registrations": tuple(
                    r.model_copy(update={"is_approved": True, "approved_by": approved_by, "approved_at": now_ms})
                    if r.user_id == user_id else r
                    for r in e.registrations
                ),
            })

        return self.apply(events, event_id, approve)

    @staticmethod
    def build_registration(user: User, *, now_ms: int) -> EventRegistration:
        return EventRegistration(
            user_id=user.id,
            user_roll_number=user.roll_number,
            user_name=user.full_name,
            registered_at=now_ms,
            is_approved=False,
        )

    @staticmethod
    def build_history(event: AdminEvent, *, today: str) -> EventHistory:
        return EventHistory(
            event_id=event.id,
            event_title=event.title,
            start_date=event.start_date,
            end_date=event.end_date,
            status=EventHistoryStatus.REGISTERED,
            registration_date=today,
        )


admin_event = CRUDAdminEvent(AdminEvent, "admin-events", entity_name="AdminEvent")
