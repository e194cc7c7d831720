"""Record store interface - JSON records keyed by id, scoped by entity type"""

from abc import ABC, abstractmethod
from typing import Any, Optional

# Entity collections
USERS = "users"
SERVICES = "services"
APPOINTMENTS = "appointments"
SESSIONS = "sessions"
META = "meta"


class RecordStore(ABC):
    """
    Persistent mapping of entity id -> JSON-serializable record.

    Every operation is scoped by entity type. Records handed out are copies;
    mutating them does not change the stored value until update() is called.
    """

    @abstractmethod
    def list(self, entity: str) -> list[dict[str, Any]]:
        """All records of an entity, in insertion order"""

    @abstractmethod
    def get(self, entity: str, record_id: str) -> Optional[dict[str, Any]]:
        """A single record, or None"""

    @abstractmethod
    def insert(self, entity: str, record_id: str, data: dict[str, Any]) -> dict[str, Any]:
        """
        Store a new record.

        Raises:
            KeyError: If a record with this id already exists
        """

    @abstractmethod
    def update(self, entity: str, record_id: str, data: dict[str, Any]) -> Optional[dict[str, Any]]:
        """Replace a record. Returns None when the id is unknown."""

    @abstractmethod
    def delete(self, entity: str, record_id: str) -> bool:
        """Delete a record. Returns False when the id is unknown."""

    @abstractmethod
    def delete_all(self, entity: str) -> int:
        """Delete every record of an entity and return how many were removed"""
