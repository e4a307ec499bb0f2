# File: nss_portal/crud/suggestion.py
from typing import List, Optional, Tuple
from nss_portal.core.exceptions import ConflictError
from nss_portal.crud.base import CRUDCollection
from nss_portal.schemas.suggestion import Suggestion, SuggestionStatus

Suggestions = Tuple[Suggestion, ...]


class CRUDSuggestion(CRUDCollection[Suggestion]):

    def create(self, suggestions: Suggestions, *, obj_in: Suggestion) -> Suggestions:
        if self.get(suggestions, obj_in.id):
            raise ConflictError(f"Suggestion id {obj_in.id} already exists", field="id", value=obj_in.id)
        return self.append(suggestions, obj_in)

    def get_by_user(self, suggestions: Suggestions, *, user_id: str) -> List[Suggestion]:
        return [s for s in suggestions if s.user_id == user_id]

    def get_by_status(self, suggestions: Suggestions, *, status: SuggestionStatus) -> List[Suggestion]:
        return [s for s in suggestions if s.status == status]

    def review(
        self,
        suggestions: Suggestions,
        *,
        suggestion_id: str,
        status: SuggestionStatus,
        reviewed_by: str,
        now_ms: int,
        response: Optional[str] = None,
    ) -> Suggestions:
        return self.apply(suggestions, suggestion_id, lambda s: s.model_copy(update={
            "status": status,
            "reviewed_by": reviewed_by,
            "reviewed_at": now_ms,
            "response": response if response is not None else s.response,
        }))


suggestion = CRUDSuggestion(Suggestion, "suggestions")
