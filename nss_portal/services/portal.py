# File: nss_portal/services/portal.py
import logging
from typing import Dict, List, Optional
from nss_portal import crud
from nss_portal.core.clock import Clock, system_clock
from nss_portal.core.config import settings
from nss_portal.core.exceptions import AuthenticationError, ConflictError
from nss_portal.core.security import get_password_hash, is_password_hash
from nss_portal.schemas.event import AdminEvent
from nss_portal.schemas.navigation import Page
from nss_portal.schemas.state import AppState
from nss_portal.schemas.suggestion import Suggestion, SuggestionStatus
from nss_portal.schemas.user import Achievement, User
from nss_portal.services import navigation
from nss_portal.services.qr_code import generate_portfolio_qr
from nss_portal.storage.base import KeyValueStore

logger = logging.getLogger(__name__)


class PortalService:
    """Owns the current ``AppState`` and the store behind it.

    Each mutation builds a new state from pure collection transforms, writes
    the collections it changed, and only then replaces ``self.state``. A
    mutation that raises leaves both untouched.
    """

    def __init__(
        self,
        store: KeyValueStore,
        *,
        clock: Clock = None,
        key_prefix: str = None,
        approver: str = None,
        generate_qr_codes: bool = True,
        portfolio_base_url: str = None,
    ):
        self.store = store
        self.clock = clock or system_clock
        self.key_prefix = settings.STORAGE_KEY_PREFIX if key_prefix is None else key_prefix
        self.approver = approver or settings.DEFAULT_APPROVER
        self.generate_qr_codes = generate_qr_codes
        self.portfolio_base_url = portfolio_base_url
        self.state = self.load()

    # ==========================================
    # PERSISTENCE
    # ==========================================

    def load(self) -> AppState:
        return AppState(
            users=crud.user.load(self.store, self.key_prefix),
            admin_events=crud.admin_event.load(self.store, self.key_prefix),
            suggestions=crud.suggestion.load(self.store, self.key_prefix),
            navigation=navigation.initial_state(),
        )

    def _commit(self, new_state: AppState, *collections: str) -> AppState:
        documents: Dict[str, bytes] = {}
        for name in collections:
            if name == crud.user.name:
                documents[crud.user.storage_key(self.key_prefix)] = crud.user.dump(new_state.users)
            elif name == crud.admin_event.name:
                documents[crud.admin_event.storage_key(self.key_prefix)] = crud.admin_event.dump(new_state.admin_events)
            elif name == crud.suggestion.name:
                documents[crud.suggestion.storage_key(self.key_prefix)] = crud.suggestion.dump(new_state.suggestions)

        if len(documents) == 1:
            key, raw = next(iter(documents.items()))
            self.store.save(key, raw)
        elif documents:
            self.store.save_many(documents)

        self.state = new_state
        return new_state

    def _with_users(self, users) -> AppState:
        """New state with ``users`` swapped in and session/display users refreshed."""
        changes = {"users": users}
        for field in ("current_user", "display_user"):
            held = getattr(self.state, field)
            if held is not None:
                fresh = crud.user.get(users, held.id)
                if fresh is not None:
                    changes[field] = fresh
        return self.state.model_copy(update=changes)

    # ==========================================
    # READ ACCESS
    # ==========================================

    @property
    def current_page(self) -> Page:
        return self.state.navigation.current_page

    @property
    def current_user(self) -> Optional[User]:
        return self.state.current_user

    @property
    def display_user(self) -> Optional[User]:
        return self.state.display_user

    def existing_roll_numbers(self) -> List[str]:
        return crud.user.roll_numbers(self.state.users)

    # ==========================================
    # USERS
    # ==========================================

    def register_user(self, user: User) -> User:
        """Add a pending volunteer and make them the session user."""
        prepared = {}
        if user.password and not is_password_hash(user.password):
            prepared["password"] = get_password_hash(user.password)
        if not user.timestamp:
            prepared["timestamp"] = self.clock.now_ms()
        if not user.qr_code and self.generate_qr_codes:
            prepared["qr_code"] = generate_portfolio_qr(user, self.portfolio_base_url)
        if prepared:
            user = user.model_copy(update=prepared)

        users, created = crud.user.register(self.state.users, obj_in=user, today=self.clock.today())
        new_state = self.state.model_copy(update={
            "users": users,
            "current_user": created,
            "navigation": navigation.navigate_to(self.state.navigation, Page.PORTFOLIO),
        })
        self._commit(new_state, crud.user.name)
        logger.info(f"Registered user {created.id} ({created.roll_number}), awaiting approval")
        return created

    def update_user(self, user: User) -> User:
        if user.password and not is_password_hash(user.password):
            user = user.model_copy(update={"password": get_password_hash(user.password)})
        users = crud.user.replace(self.state.users, user)
        new_state = self._with_users(users).model_copy(update={"current_user": user})
        self._commit(new_state, crud.user.name)
        logger.info(f"Updated user {user.id}")
        return user

    def approve_user(self, user_id: str, approved_by: str = None) -> User:
        users = crud.user.approve(
            self.state.users,
            user_id=user_id,
            approved_by=approved_by or self.approver,
            now_ms=self.clock.now_ms(),
        )
        self._commit(self._with_users(users), crud.user.name)
        logger.info(f"User {user_id} approved by {approved_by or self.approver}")
        return crud.user.get(users, user_id)

    def reject_user(self, user_id: str, reason: str = None, rejected_by: str = None) -> User:
        users = crud.user.reject(
            self.state.users,
            user_id=user_id,
            rejected_by=rejected_by or self.approver,
            now_ms=self.clock.now_ms(),
            reason=reason,
        )
        self._commit(self._with_users(users), crud.user.name)
        rejected = crud.user.get(users, user_id)
        logger.info(f"User {user_id} rejected by {rejected.rejected_by}: {rejected.rejection_reason}")
        return rejected

    def add_achievement(self, user_id: str, achievement: Achievement) -> User:
        users = crud.user.add_achievement(self.state.users, user_id=user_id, achievement=achievement)
        self._commit(self._with_users(users), crud.user.name)
        logger.info(f"Achievement {achievement.id} added to user {user_id}")
        return crud.user.get(users, user_id)

    def update_achievement(self, user_id: str, achievement_id: str, achievement: Achievement) -> User:
        users = crud.user.update_achievement(
            self.state.users,
            user_id=user_id,
            achievement_id=achievement_id,
            achievement=achievement,
        )
        self._commit(self._with_users(users), crud.user.name)
        logger.info(f"Achievement {achievement_id} of user {user_id} updated")
        return crud.user.get(users, user_id)

    # ==========================================
    # EVENTS
    # ==========================================

    def save_admin_event(self, event: AdminEvent) -> AdminEvent:
        if not event.timestamp:
            event = event.model_copy(update={"timestamp": self.clock.now_ms()})
        events, created = crud.admin_event.create(self.state.admin_events, obj_in=event)
        self._commit(self.state.model_copy(update={"admin_events": events}), crud.admin_event.name)
        logger.info(f"Event {created.id} '{created.title}' created ({created.start_date} to {created.end_date})")
        return created

    def approve_event_registration(self, event_id: str, user_id: str, approved_by: str = None) -> AdminEvent:
        events = crud.admin_event.approve_registration(
            self.state.admin_events,
            event_id=event_id,
            user_id=user_id,
            approved_by=approved_by or self.approver,
            now_ms=self.clock.now_ms(),
        )
        self._commit(self.state.model_copy(update={"admin_events": events}), crud.admin_event.name)
        logger.info(f"Registration of user {user_id} for event {event_id} approved")
        return crud.admin_event.get(events, event_id)

    def register_for_event(self, event_id: str, user: User) -> AdminEvent:
        """Sign a user up for an event.

        Writes the event's registration list and the user's event history
        together through ``save_many``.
        """
        event = crud.admin_event.get_or_raise(self.state.admin_events, event_id)
        member = crud.user.get_or_raise(self.state.users, user.id)
        if event.get_registration(member.id) is not None:
            raise ConflictError(
                f"User {member.id} is already registered for event {event_id}",
                field="userId",
                value=member.id,
            )

        registration = crud.admin_event.build_registration(member, now_ms=self.clock.now_ms())
        history = crud.admin_event.build_history(event, today=self.clock.today())

        events = crud.admin_event.add_registration(
            self.state.admin_events, event_id=event_id, registration=registration
        )
        users = crud.user.add_event_history(self.state.users, user_id=member.id, entry=history)
        new_state = self._with_users(users).model_copy(update={"admin_events": events})
        self._commit(new_state, crud.admin_event.name, crud.user.name)
        logger.info(f"User {member.id} ({member.roll_number}) registered for event {event_id}")
        return crud.admin_event.get(events, event_id)

    # ==========================================
    # SUGGESTIONS
    # ==========================================

    def save_suggestion(self, suggestion: Suggestion) -> Suggestion:
        if not suggestion.timestamp:
            suggestion = suggestion.model_copy(update={"timestamp": self.clock.now_ms()})
        suggestions = crud.suggestion.create(self.state.suggestions, obj_in=suggestion)
        self._commit(self.state.model_copy(update={"suggestions": suggestions}), crud.suggestion.name)
        logger.info(f"Suggestion {suggestion.id} submitted by {suggestion.user_roll_number}")
        return suggestion

    def update_suggestion(self, suggestion: Suggestion) -> Suggestion:
        suggestions = crud.suggestion.replace(self.state.suggestions, suggestion)
        self._commit(self.state.model_copy(update={"suggestions": suggestions}), crud.suggestion.name)
        logger.info(f"Suggestion {suggestion.id} updated, status {suggestion.status.value}")
        return suggestion

    def review_suggestion(
        self,
        suggestion_id: str,
        status: SuggestionStatus,
        response: str = None,
        reviewed_by: str = None,
    ) -> Suggestion:
        suggestions = crud.suggestion.review(
            self.state.suggestions,
            suggestion_id=suggestion_id,
            status=SuggestionStatus(status),
            reviewed_by=reviewed_by or self.approver,
            now_ms=self.clock.now_ms(),
            response=response,
        )
        self._commit(self.state.model_copy(update={"suggestions": suggestions}), crud.suggestion.name)
        logger.info(f"Suggestion {suggestion_id} reviewed: {SuggestionStatus(status).value}")
        return crud.suggestion.get(suggestions, suggestion_id)

    # ==========================================
    # SESSION
    # ==========================================

    def login(self, roll_number: str, password: str) -> User:
        member = crud.user.authenticate(self.state.users, roll_number=roll_number, password=password)
        if member is None:
            logger.warning(f"Failed login for roll number {roll_number}")
            raise AuthenticationError("Invalid roll number or password")
        self.state = self.state.model_copy(update={
            "current_user": member,
            "is_logged_in": True,
            "navigation": navigation.navigate_to(self.state.navigation, Page.PORTFOLIO),
        })
        logger.info(f"User {member.id} logged in")
        return member

    def logout(self) -> AppState:
        self.state = self.state.model_copy(update={
            "current_user": None,
            "is_logged_in": False,
            "navigation": navigation.reset_to_landing(),
        })
        return self.state

    def display_portfolio(self, user: User) -> AppState:
        """Show a portfolio read-only; does not touch the session user."""
        self.state = self.state.model_copy(update={
            "display_user": user,
            "navigation": navigation.navigate_to(self.state.navigation, Page.DISPLAY),
        })
        return self.state

    # ==========================================
    # NAVIGATION
    # ==========================================

    def navigate_to(self, page: Page) -> AppState:
        self.state = self.state.model_copy(update={
            "navigation": navigation.navigate_to(self.state.navigation, page),
        })
        return self.state

    def navigate_back(self) -> AppState:
        self.state = self.state.model_copy(update={
            "navigation": navigation.navigate_back(self.state.navigation),
        })
        return self.state

    def go_to_registration(self) -> AppState:
        return self.navigate_to(Page.REGISTRATION)

    def go_to_login(self) -> AppState:
        return self.navigate_to(Page.LOGIN)

    def go_to_admin(self) -> AppState:
        return self.navigate_to(Page.ADMIN)

    def go_to_events(self) -> AppState:
        return self.navigate_to(Page.EVENTS)

    def go_to_forgot_password(self) -> AppState:
        return self.navigate_to(Page.FORGOT_PASSWORD)

    def go_to_landing(self) -> AppState:
        self.state = self.state.model_copy(update={
            "current_user": None,
            "display_user": None,
            "is_logged_in": False,
            "navigation": navigation.reset_to_landing(),
        })
        return self.state
