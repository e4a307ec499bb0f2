# File: nss_portal/schemas/user.py
from typing import Optional, Tuple
import enum
from nss_portal.schemas.base import PortalSchema

# ==========================================
# ENUMS
# ==========================================

class ApprovalState(str, enum.Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"

class AchievementLevel(str, enum.Enum):
    NATIONAL = "national"
    STATE = "state"
    DISTRICT = "district"

class EventHistoryStatus(str, enum.Enum):
    REGISTERED = "registered"
    ATTENDED = "attended"
    COMPLETED = "completed"

# ==========================================
# OWNED RECORDS
# ==========================================

class EventPhoto(PortalSchema):
    id: str
    photo: str = ""
    title: str = ""
    description: str = ""

class Achievement(PortalSchema):
    id: str
    title: str
    description: str = ""
    level: AchievementLevel
    date: str
    photo: str = ""
    is_verified: bool = False
    verified_by: Optional[str] = None
    verified_at: Optional[int] = None

class Certificate(PortalSchema):
    id: str
    title: str
    description: str = ""
    file_url: str = ""
    upload_date: str
    is_verified: bool = False
    verified_by: Optional[str] = None
    verified_at: Optional[int] = None

class EventHistory(PortalSchema):
    """Snapshot of an event taken when the user registered; not kept in sync."""
    event_id: str
    event_title: str
    start_date: str
    end_date: str
    status: EventHistoryStatus = EventHistoryStatus.REGISTERED
    registration_date: str
    attendance_date: Optional[str] = None
    completion_date: Optional[str] = None

# ==========================================
# USER
# ==========================================

class User(PortalSchema):
    """A volunteer. ``password`` holds a passlib hash once registered."""
    id: str
    full_name: str
    roll_number: str
    branch: str = ""
    password: str = ""
    profile_photo: str = ""
    event_photos: Tuple[EventPhoto, ...] = ()
    qr_code: str = ""
    timestamp: int = 0

    # Approval workflow
    is_approved: bool = False
    is_rejected: bool = False
    approved_by: Optional[str] = None
    approved_at: Optional[int] = None
    rejected_by: Optional[str] = None
    rejected_at: Optional[int] = None
    rejection_reason: Optional[str] = None

    # Volunteer tracking
    join_date: Optional[str] = None
    end_date: Optional[str] = None
    achievements: Tuple[Achievement, ...] = ()
    certificates: Tuple[Certificate, ...] = ()
    event_history: Tuple[EventHistory, ...] = ()

    @property
    def approval_state(self) -> ApprovalState:
        if self.is_rejected:
            return ApprovalState.REJECTED
        if self.is_approved:
            return ApprovalState.APPROVED
        return ApprovalState.PENDING

    def get_achievement(self, achievement_id: str) -> Optional[Achievement]:
        return next((a for a in self.achievements if a.id == achievement_id), None)
