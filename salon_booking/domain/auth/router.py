"""Auth router - FastAPI endpoints for login, registration and session"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, status

from ...store import RecordStore, get_store
from .schemas import LoginRequest, RegisterRequest, Session, User
from .service import AuthService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Authentication"])


def get_auth_service(store: RecordStore = Depends(get_store)) -> AuthService:
    """Dependency injection for AuthService"""
    return AuthService(store)


@router.post("/login", response_model=User)
async def login(data: LoginRequest, service: AuthService = Depends(get_auth_service)):
    """Log in with email and password"""
    return service.login(data.email, data.password)


@router.post("/register", response_model=User, status_code=status.HTTP_201_CREATED)
async def register(data: RegisterRequest, service: AuthService = Depends(get_auth_service)):
    """Create a client account and log it in"""
    return service.register(data)


@router.post("/logout")
async def logout(service: AuthService = Depends(get_auth_service)):
    return service.logout()


@router.get("/session", response_model=Optional[Session])
async def get_session(service: AuthService = Depends(get_auth_service)):
    """The current session, or null"""
    return service.current_session()
