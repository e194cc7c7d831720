"""Initial data - default catalog and admin account"""

import logging
from datetime import datetime, timezone

from .config import (
    DEFAULT_ADMIN_EMAIL,
    DEFAULT_ADMIN_NAME,
    DEFAULT_ADMIN_PASSWORD,
    DEFAULT_ADMIN_PHONE,
)
from .domain.auth.repository import UserRepository
from .domain.auth.service import AuthService
from .domain.catalog.repository import ServiceRepository
from .domain.catalog.schemas import Service
from .store import RecordStore

logger = logging.getLogger(__name__)

DEFAULT_SERVICES = [
    {
        "id": "1",
        "name": "Corte Clássico",
        "price": 50,
        "durationMinutes": 30,
        "imageUrl": "https://picsum.photos/400/300?random=1",
        "description": "Corte tradicional com tesoura e acabamento na navalha.",
    },
    {
        "id": "2",
        "name": "Barba Terapia",
        "price": 40,
        "durationMinutes": 30,
        "imageUrl": "https://picsum.photos/400/300?random=2",
        "description": "Modelagem de barba com toalha quente e óleos essenciais.",
    },
    {
        "id": "3",
        "name": "Corte + Barba (Combo)",
        "price": 80,
        "durationMinutes": 50,
        "imageUrl": "https://picsum.photos/400/300?random=3",
        "description": "O pacote completo para o homem moderno.",
    },
    {
        "id": "4",
        "name": "Pezinho / Acabamento",
        "price": 20,
        "durationMinutes": 15,
        "imageUrl": "https://picsum.photos/400/300?random=4",
        "description": "Manutenção rápida dos contornos.",
    },
]


def seed_catalog(store: RecordStore) -> int:
    """
    Insert the default services the first time the catalog is initialized.

    A catalog that was later emptied is left empty.
    """
    if ServiceRepository.is_catalog_seeded(store):
        return 0

    for data in DEFAULT_SERVICES:
        ServiceRepository.create_service(store, Service(**data))
    ServiceRepository.mark_catalog_seeded(store, datetime.now(timezone.utc).isoformat())

    logger.info(f"🌱 Seeded {len(DEFAULT_SERVICES)} default services")
    return len(DEFAULT_SERVICES)


def seed_admin(store: RecordStore) -> bool:
    """Create the default admin account when there are no users at all"""
    if UserRepository.get_users(store):
        return False

    AuthService(store).create_admin(
        name=DEFAULT_ADMIN_NAME,
        email=DEFAULT_ADMIN_EMAIL,
        phone=DEFAULT_ADMIN_PHONE,
        password=DEFAULT_ADMIN_PASSWORD,
    )
    logger.info("🌱 Seeded default admin account")
    return True


def seed_defaults(store: RecordStore) -> dict:
    return {"services": seed_catalog(store), "admin": seed_admin(store)}
