"""Auth service - Login, registration and the current session"""

import logging
from datetime import datetime, timezone
from typing import Optional

from ...errors import AuthError, ValidationError
from ...security_utils import (
    generate_record_id,
    hash_password_bcrypt,
    mask_email,
    verify_password_bcrypt,
)
from ...store import RecordStore
from ...utils.sanitization import sanitize_string
from .repository import UserRepository
from .schemas import RegisterRequest, Session, User, UserRecord, UserRole

logger = logging.getLogger(__name__)


class AuthService:
    """Service layer for authentication"""

    def __init__(self, store: RecordStore):
        self.store = store
        self.repo = UserRepository()

    def login(self, email: str, password: str) -> User:
        """
        Check credentials and open the current session.

        Raises:
            AuthError: Unknown email or wrong password (same message for both)
        """
        user = self.repo.get_user_by_email(self.store, email)
        if not user or not verify_password_bcrypt(password, user.passwordHash):
            logger.warning(f"🔒 Failed login for {mask_email(email)}")
            raise AuthError("invalid credentials")

        return self._open_session(user)

    def register(self, data: RegisterRequest) -> User:
        """
        Create a CLIENT account and log it in.

        Raises:
            ValidationError: If the email is already registered
        """
        if self.repo.get_user_by_email(self.store, data.email):
            raise ValidationError("email already registered")

        user = UserRecord(
            id=generate_record_id(),
            name=sanitize_string(data.name),
            email=data.email,
            phone=data.phone,
            role=UserRole.CLIENT,
            passwordHash=hash_password_bcrypt(data.password),
        )
        created = self.repo.create_user(self.store, user)
        logger.info(f"📥 Registered client {created.id} ({mask_email(created.email)})")

        return self._open_session(created)

    def create_admin(self, name: str, email: str, phone: str, password: str) -> User:
        """Create an ADMIN account without opening a session (seeding)"""
        user = UserRecord(
            id=generate_record_id(),
            name=name,
            email=email.strip().lower(),
            phone=phone,
            role=UserRole.ADMIN,
            passwordHash=hash_password_bcrypt(password),
        )
        return self.repo.create_user(self.store, user).to_public()

    def current_session(self) -> Optional[Session]:
        return self.repo.get_current_session(self.store)

    def logout(self) -> dict:
        self.repo.clear_current_session(self.store)
        logger.info("👋 Session closed")
        return {"message": "Logged out"}

    def _open_session(self, user: UserRecord) -> User:
        public = user.to_public()
        self.repo.save_current_session(
            self.store, Session(user=public, loggedInAt=datetime.now(timezone.utc))
        )
        logger.info(f"✅ Session opened for user {public.id} ({public.role.value})")
        return public
