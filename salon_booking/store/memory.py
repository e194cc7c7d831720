import copy
from threading import Lock
from typing import Any, Optional

from .base import RecordStore


class InMemoryRecordStore(RecordStore):
    """Process-local record store, used by tests and ephemeral deployments"""

    def __init__(self):
        self._collections: dict[str, dict[str, dict[str, Any]]] = {}
        self._lock = Lock()

    def _collection(self, entity: str) -> dict[str, dict[str, Any]]:
        return self._collections.setdefault(entity, {})

    def list(self, entity: str) -> list[dict[str, Any]]:
        with self._lock:
            return [copy.deepcopy(r) for r in self._collection(entity).values()]

    def get(self, entity: str, record_id: str) -> Optional[dict[str, Any]]:
        with self._lock:
            record = self._collection(entity).get(str(record_id))
            return copy.deepcopy(record) if record is not None else None

    def insert(self, entity: str, record_id: str, data: dict[str, Any]) -> dict[str, Any]:
        with self._lock:
            collection = self._collection(entity)
            if str(record_id) in collection:
                raise KeyError(f"{entity}/{record_id} already exists")
            collection[str(record_id)] = copy.deepcopy(data)
            return copy.deepcopy(data)

    def update(self, entity: str, record_id: str, data: dict[str, Any]) -> Optional[dict[str, Any]]:
        with self._lock:
            collection = self._collection(entity)
            if str(record_id) not in collection:
                return None
            collection[str(record_id)] = copy.deepcopy(data)
            return copy.deepcopy(data)

    def delete(self, entity: str, record_id: str) -> bool:
        with self._lock:
            return self._collection(entity).pop(str(record_id), None) is not None

    def delete_all(self, entity: str) -> int:
        with self._lock:
            collection = self._collection(entity)
            count = len(collection)
            collection.clear()
            return count
