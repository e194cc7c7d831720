"""SQLAlchemy-backed record store"""

import copy
import logging
from typing import Any, Optional

from sqlalchemy.orm import Session

from ..models import Record
from .base import RecordStore

logger = logging.getLogger(__name__)


class SqlRecordStore(RecordStore):
    """Record store over the `records` table, one committed transaction per write"""

    def __init__(self, db: Session):
        self.db = db

    def _query(self, entity: str):
        return self.db.query(Record).filter(Record.entity == entity)

    def _row(self, entity: str, record_id: str) -> Optional[Record]:
        return self._query(entity).filter(Record.record_id == str(record_id)).first()

    def _commit(self) -> None:
        try:
            self.db.commit()
        except Exception as e:
            logger.error(f"❌ Record store write failed: {e}")
            self.db.rollback()
            raise

    def list(self, entity: str) -> list[dict[str, Any]]:
        return [copy.deepcopy(row.data) for row in self._query(entity).order_by(Record.seq.asc()).all()]

    def get(self, entity: str, record_id: str) -> Optional[dict[str, Any]]:
        row = self._row(entity, record_id)
        return copy.deepcopy(row.data) if row else None

    def insert(self, entity: str, record_id: str, data: dict[str, Any]) -> dict[str, Any]:
        if self._row(entity, record_id) is not None:
            raise KeyError(f"{entity}/{record_id} already exists")

        row = Record(entity=entity, record_id=str(record_id), data=copy.deepcopy(data))
        self.db.add(row)
        self._commit()
        return copy.deepcopy(row.data)

    def update(self, entity: str, record_id: str, data: dict[str, Any]) -> Optional[dict[str, Any]]:
        row = self._row(entity, record_id)
        if row is None:
            return None

        # Reassign so the JSON column is flagged dirty
        row.data = copy.deepcopy(data)
        self._commit()
        return copy.deepcopy(row.data)

    def delete(self, entity: str, record_id: str) -> bool:
        row = self._row(entity, record_id)
        if row is None:
            return False

        self.db.delete(row)
        self._commit()
        return True

    def delete_all(self, entity: str) -> int:
        count = self._query(entity).delete(synchronize_session=False)
        self._commit()
        return count
