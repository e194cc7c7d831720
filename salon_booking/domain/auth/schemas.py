"""Auth domain schemas - Pydantic models for validation"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field, field_validator

from ...shared.validators import validate_email, validate_phone


class UserRole(str, Enum):
    ADMIN = "ADMIN"
    CLIENT = "CLIENT"


class User(BaseModel):
    """Public view of a user - never carries credentials"""

    id: str
    name: str
    email: str
    phone: str
    role: UserRole


class UserRecord(User):
    """User as stored, with the password hash"""

    passwordHash: str

    def to_public(self) -> User:
        return User(**self.model_dump(exclude={"passwordHash"}))


class LoginRequest(BaseModel):
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v):
        # Unknown formats fall through to "invalid credentials"
        return v.strip().lower()


class RegisterRequest(BaseModel):
    """Schema for a client sign-up"""

    name: str = Field(min_length=1, max_length=200)
    email: str
    phone: str
    password: str = Field(min_length=1, max_length=72)

    @field_validator("email")
    @classmethod
    def check_email(cls, v):
        return validate_email(v)

    @field_validator("phone")
    @classmethod
    def check_phone(cls, v):
        return validate_phone(v)


class Session(BaseModel):
    """The current session record"""

    user: User
    loggedInAt: datetime
