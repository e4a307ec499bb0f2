from .user import (
    User,
    EventPhoto,
    Achievement,
    Certificate,
    EventHistory,
    ApprovalState,
    AchievementLevel,
    EventHistoryStatus,
)
from .event import AdminEvent, EventRegistration
from .suggestion import Suggestion, SuggestionCategory, SuggestionStatus
from .navigation import Page, NavigationState
from .state import AppState
