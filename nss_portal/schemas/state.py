# File: nss_portal/schemas/state.py
from typing import Optional, Tuple
from pydantic import BaseModel, ConfigDict
from nss_portal.schemas.event import AdminEvent
from nss_portal.schemas.navigation import NavigationState
from nss_portal.schemas.suggestion import Suggestion
from nss_portal.schemas.user import User


class AppState(BaseModel):
    """Everything a view can read. Replaced, never mutated."""

    model_config = ConfigDict(frozen=True)

    users: Tuple[User, ...] = ()
    admin_events: Tuple[AdminEvent, ...] = ()
    suggestions: Tuple[Suggestion, ...] = ()
    navigation: NavigationState = NavigationState()
    current_user: Optional[User] = None
    display_user: Optional[User] = None
    is_logged_in: bool = False

    @property
    def current_page(self):
        return self.navigation.current_page

    def get_user(self, user_id: str) -> Optional[User]:
        return next((u for u in self.users if u.id == user_id), None)

    def get_event(self, event_id: str) -> Optional[AdminEvent]:
        return next((e for e in self.admin_events if e.id == event_id), None)
