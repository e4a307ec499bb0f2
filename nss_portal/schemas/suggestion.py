# File: nss_portal/schemas/suggestion.py
from typing import Optional
import enum
from nss_portal.schemas.base import PortalSchema


class SuggestionCategory(str, enum.Enum):
    GENERAL = "general"
    EVENT = "event"
    SYSTEM = "system"
    ACHIEVEMENT = "achievement"


class SuggestionStatus(str, enum.Enum):
    PENDING = "pending"
    REVIEWED = "reviewed"
    IMPLEMENTED = "implemented"
    REJECTED = "rejected"


class Suggestion(PortalSchema):
    id: str
    user_id: str
    user_name: str
    user_roll_number: str
    title: str
    description: str = ""
    category: SuggestionCategory = SuggestionCategory.GENERAL
    status: SuggestionStatus = SuggestionStatus.PENDING
    timestamp: int = 0
    reviewed_by: Optional[str] = None
    reviewed_at: Optional[int] = None
    response: Optional[str] = None
