# File: nss_portal/crud/base.py
import logging
from typing import Callable, Generic, Iterable, Optional, Tuple, Type, TypeVar
from pydantic import BaseModel, TypeAdapter, ValidationError
from nss_portal.core.config import settings
from nss_portal.core.exceptions import NotFoundError
from nss_portal.storage.base import KeyValueStore

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=BaseModel)


class CRUDCollection(Generic[ModelType]):
    """Operations on one whole collection stored as a single JSON document.

    Every method takes the current tuple and returns a new one; nothing here
    touches storage except ``load`` and ``dump``.
    """

    def __init__(self, model: Type[ModelType], name: str, entity_name: str = None):
        self.model = model
        self.name = name
        self.entity_name = entity_name or model.__name__
        self._adapter = TypeAdapter(Tuple[model, ...])

    def storage_key(self, prefix: str = None) -> str:
        return f"{settings.STORAGE_KEY_PREFIX if prefix is None else prefix}{self.name}"

    # ---------- serialization ----------

    def dump(self, collection: Iterable[ModelType]) -> bytes:
        return self._adapter.dump_json(tuple(collection), by_alias=True, exclude_none=True)

    def parse(self, raw: bytes) -> Tuple[ModelType, ...]:
        return self._adapter.validate_json(raw)

    def load(self, store: KeyValueStore, prefix: str = None) -> Tuple[ModelType, ...]:
        key = self.storage_key(prefix)
        raw = store.load(key)
        if raw is None:
            return ()
        try:
            collection = self.parse(raw)
        except ValidationError as e:
            logger.warning(f"Ignoring unreadable '{key}' document, starting empty: {e.error_count()} error(s)")
            return ()
        logger.info(f"Loaded {len(collection)} {self.name} from '{key}'")
        return collection

    # ---------- lookups ----------

    def get(self, collection: Iterable[ModelType], id: str) -> Optional[ModelType]:
        return next((obj for obj in collection if obj.id == id), None)

    def get_or_raise(self, collection: Iterable[ModelType], id: str) -> ModelType:
        obj = self.get(collection, id)
        if obj is None:
            raise NotFoundError(self.entity_name, id)
        return obj

    # ---------- transforms ----------

    def append(self, collection: Tuple[ModelType, ...], obj: ModelType) -> Tuple[ModelType, ...]:
        return tuple(collection) + (obj,)

    def replace(self, collection: Tuple[ModelType, ...], obj: ModelType) -> Tuple[ModelType, ...]:
        return self.apply(collection, obj.id, lambda _current: obj)

    def apply(
        self,
        collection: Tuple[ModelType, ...],
        id: str,
        change: Callable[[ModelType], ModelType],
    ) -> Tuple[ModelType, ...]:
        self.get_or_raise(collection, id)
        return tuple(change(obj) if obj.id == id else obj for obj in collection)
