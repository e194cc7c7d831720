"""Record store selection and FastAPI dependency"""

import logging
from contextlib import contextmanager
from typing import Iterator

from ..config import RECORD_STORE_BACKEND
from ..database import SessionLocal
from .base import APPOINTMENTS, META, SERVICES, SESSIONS, USERS, RecordStore
from .memory import InMemoryRecordStore
from .sql import SqlRecordStore

logger = logging.getLogger(__name__)

# Shared instance for the "memory" backend
memory_store = InMemoryRecordStore()


@contextmanager
def store_session() -> Iterator[RecordStore]:
    """Open a record store for the configured backend (startup jobs, scripts)"""
    if RECORD_STORE_BACKEND == "memory":
        yield memory_store
        return

    db = SessionLocal()
    try:
        yield SqlRecordStore(db)
    finally:
        db.close()


def get_store() -> Iterator[RecordStore]:
    """Dependency injection for the record store"""
    with store_session() as store:
        yield store


__all__ = [
    "APPOINTMENTS",
    "META",
    "SERVICES",
    "SESSIONS",
    "USERS",
    "InMemoryRecordStore",
    "RecordStore",
    "SqlRecordStore",
    "get_store",
    "memory_store",
    "store_session",
]
