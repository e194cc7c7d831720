"""Catalog repository - Record store operations for services"""

from typing import Optional

from ...store import META, SERVICES, RecordStore
from .schemas import Service

CATALOG_SEEDED_MARKER = "catalog_seeded"


class ServiceRepository:
    """Repository for service records"""

    @staticmethod
    def get_services(store: RecordStore) -> list[Service]:
        """Get the whole catalog"""
        return [Service(**record) for record in store.list(SERVICES)]

    @staticmethod
    def get_service_by_id(store: RecordStore, service_id: str) -> Optional[Service]:
        """Get a specific service by ID"""
        record = store.get(SERVICES, str(service_id))
        return Service(**record) if record else None

    @staticmethod
    def create_service(store: RecordStore, service: Service) -> Service:
        """Insert a new service"""
        return Service(**store.insert(SERVICES, service.id, service.model_dump()))

    @staticmethod
    def update_service(store: RecordStore, service: Service) -> Optional[Service]:
        """Replace a stored service"""
        record = store.update(SERVICES, service.id, service.model_dump())
        return Service(**record) if record else None

    @staticmethod
    def delete_service(store: RecordStore, service_id: str) -> bool:
        """Delete a service"""
        return store.delete(SERVICES, str(service_id))

    @staticmethod
    def delete_all_services(store: RecordStore) -> int:
        """Clear the catalog"""
        return store.delete_all(SERVICES)

    @staticmethod
    def is_catalog_seeded(store: RecordStore) -> bool:
        """Whether the default catalog was ever written"""
        return store.get(META, CATALOG_SEEDED_MARKER) is not None

    @staticmethod
    def mark_catalog_seeded(store: RecordStore, seeded_at: str) -> None:
        """Remember that the catalog was initialized so an emptied catalog stays empty"""
        store.insert(META, CATALOG_SEEDED_MARKER, {"seededAt": seeded_at})
