"""Auth repository - Record store operations for users and the current session"""

from typing import Optional

from ...store import SESSIONS, USERS, RecordStore
from .schemas import Session, UserRecord

CURRENT_SESSION_ID = "current"


class UserRepository:
    """Repository for user and session records"""

    @staticmethod
    def get_users(store: RecordStore) -> list[UserRecord]:
        return [UserRecord(**record) for record in store.list(USERS)]

    @staticmethod
    def get_user_by_email(store: RecordStore, email: str) -> Optional[UserRecord]:
        """Get user by email (case-insensitive)"""
        email = email.strip().lower()
        for record in store.list(USERS):
            if str(record.get("email", "")).lower() == email:
                return UserRecord(**record)
        return None

    @staticmethod
    def create_user(store: RecordStore, user: UserRecord) -> UserRecord:
        return UserRecord(**store.insert(USERS, user.id, user.model_dump(mode="json")))

    @staticmethod
    def get_current_session(store: RecordStore) -> Optional[Session]:
        record = store.get(SESSIONS, CURRENT_SESSION_ID)
        return Session(**record) if record else None

    @staticmethod
    def save_current_session(store: RecordStore, session: Session) -> Session:
        data = session.model_dump(mode="json")
        if store.update(SESSIONS, CURRENT_SESSION_ID, data) is None:
            store.insert(SESSIONS, CURRENT_SESSION_ID, data)
        return session

    @staticmethod
    def clear_current_session(store: RecordStore) -> bool:
        return store.delete(SESSIONS, CURRENT_SESSION_ID)
