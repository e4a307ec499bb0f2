# File: nss_portal/crud/user.py
from typing import List, Optional, Tuple
from nss_portal.core.config import settings
from nss_portal.core.exceptions import ConflictError, NotFoundError
from nss_portal.core.security import verify_password
from nss_portal.crud.base import CRUDCollection
from nss_portal.schemas.user import Achievement, EventHistory, User

Users = Tuple[User, ...]


class CRUDUser(CRUDCollection[User]):

    def get_by_roll_number(self, users: Users, *, roll_number: str) -> Optional[User]:
        return next((u for u in users if u.roll_number == roll_number), None)

    def roll_numbers(self, users: Users) -> List[str]:
        return [u.roll_number for u in users]

    def register(self, users: Users, *, obj_in: User, today: str) -> Tuple[Users, User]:
        """Append a new pending user; roll numbers must be unique."""
        if self.get_by_roll_number(users, roll_number=obj_in.roll_number):
            raise ConflictError(
                f"Roll number {obj_in.roll_number} is already registered",
                field="rollNumber",
                value=obj_in.roll_number,
            )
        if self.get(users, obj_in.id):
            raise ConflictError(f"User id {obj_in.id} already exists", field="id", value=obj_in.id)

        db_obj = obj_in.model_copy(update={
            "is_approved": False,
            "is_rejected": False,
            "join_date": obj_in.join_date or today,
        })
        return self.append(users, db_obj), db_obj

    def approve(self, users: Users, *, user_id: str, approved_by: str, now_ms: int) -> Users:
        return self.apply(users, user_id, lambda u: u.model_copy(update={
            "is_approved": True,
            "is_rejected": False,
            "approved_by": approved_by,
            "approved_at": now_ms,
        }))

    def reject(
        self,
        users: Users,
        *,
        user_id: str,
        rejected_by: str,
        now_ms: int,
        reason: Optional[str] = None,
    ) -> Users:
        return self.apply(users, user_id, lambda u: u.model_copy(update={
            "is_approved": False,
            "is_rejected": True,
            "rejected_by": rejected_by,
            "rejected_at": now_ms,
            "rejection_reason": reason or settings.DEFAULT_REJECTION_REASON,
        }))

    def add_achievement(self, users: Users, *, user_id: str, achievement: Achievement) -> Users:
        return self.apply(users, user_id, lambda u: u.model_copy(update={
            "achievements": u.achievements + (achievement,),
        }))

    def update_achievement(
        self, users: Users, *, user_id: str, achievement_id: str, achievement: Achievement
    ) -> Users:
        owner = self.get_or_raise(users, user_id)
        if owner.get_achievement(achievement_id) is None:
            raise NotFoundError("Achievement", achievement_id)
        return self.apply(users, user_id, lambda u: u.model_copy(update={
            "achievements": tuple(achievement if a.id == achievement_id else a for a in u.achievements),
        }))

    def add_event_history(self, users: Users, *, user_id: str, entry: EventHistory) -> Users:
        return self.apply(users, user_id, lambda u: u.model_copy(update={
            "event_history": u.event_history + (entry,),
        }))

    def authenticate(self, users: Users, *, roll_number: str, password: str) -> Optional[User]:
        user = self.get_by_roll_number(users, roll_number=roll_number)
        if not user:
            return None
        if not verify_password(password, user.password):
            return None
        return user


user = CRUDUser(User, "users")
