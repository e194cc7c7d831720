"""
Security utilities - password hashing and log masking
"""

import logging
import uuid

# Password hashing
from passlib.context import CryptContext

from .config import BCRYPT_ROUNDS

logger = logging.getLogger(__name__)

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=BCRYPT_ROUNDS)


def hash_password_bcrypt(password: str) -> str:
    """Hash password using bcrypt"""
    return pwd_context.hash(password)


def verify_password_bcrypt(plain_password: str, hashed_password: str) -> bool:
    """Verify password against bcrypt hash"""
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError) as e:
        logger.error(f"Password verification error: {e}")
        return False


def generate_record_id() -> str:
    """Generate a unique id for a new record"""
    return uuid.uuid4().hex


def mask_sensitive_data(data: str, visible_chars: int = 4) -> str:
    """
    Mask sensitive data for logging/display

    Args:
        data: Sensitive data to mask
        visible_chars: Number of characters to show at the end

    Returns:
        Masked string
    """
    if len(data) <= visible_chars:
        return "*" * len(data)

    return "*" * (len(data) - visible_chars) + data[-visible_chars:]


def mask_email(email: str) -> str:
    """Mask the local part of an email address for log lines"""
    if "@" not in email:
        return mask_sensitive_data(email)
    local, domain = email.split("@", 1)
    return f"{local[:1]}***@{domain}"
