"""Catalog service - Business logic for service catalog operations"""

import logging

from pydantic import ValidationError as PydanticValidationError

from ...errors import NotFoundError, ValidationError
from ...security_utils import generate_record_id
from ...store import RecordStore
from ...utils.sanitization import sanitize_string
from .repository import ServiceRepository
from .schemas import Service, ServiceCreate, ServiceUpdate

logger = logging.getLogger(__name__)

# Fields that may be cleared by an explicit null in a partial update
NULLABLE_FIELDS = {"description"}


class CatalogService:
    """Service layer for catalog business logic"""

    def __init__(self, store: RecordStore):
        self.store = store
        self.repo = ServiceRepository()

    def get_services(self) -> list[Service]:
        """Get all services"""
        return self.repo.get_services(self.store)

    def get_service(self, service_id: str) -> Service:
        """Get a specific service"""
        service = self.repo.get_service_by_id(self.store, service_id)
        if not service:
            raise NotFoundError("service not found")
        return service

    def create_service(self, data: ServiceCreate) -> Service:
        """Create a new service with a fresh id"""
        service = Service(
            id=generate_record_id(),
            name=sanitize_string(data.name),
            price=data.price,
            durationMinutes=data.durationMinutes,
            imageUrl=data.imageUrl,
            description=sanitize_string(data.description),
        )
        created = self.repo.create_service(self.store, service)
        logger.info(f"✅ Service created: {created.id} ({created.name})")
        return created

    def update_service(self, service_id: str, data: ServiceUpdate) -> Service:
        """Merge partial fields into an existing service"""
        service = self.get_service(service_id)

        updates = {}
        for key, value in data.model_dump(exclude_unset=True).items():
            if value is None and key not in NULLABLE_FIELDS:
                continue
            if key in ("name", "description"):
                value = sanitize_string(value)
            updates[key] = value

        try:
            merged = Service(**{**service.model_dump(), **updates, "id": service.id})
        except PydanticValidationError as e:
            raise ValidationError(f"invalid service fields: {e.errors()[0]['msg']}") from e

        updated = self.repo.update_service(self.store, merged)
        if updated is None:
            # Deleted between read and write
            raise NotFoundError("service not found")

        logger.info(f"✏️ Service updated: {service_id} fields={sorted(updates)}")
        return updated

    def delete_service(self, service_id: str) -> dict:
        """Delete a service; unknown ids are ignored"""
        if self.repo.delete_service(self.store, service_id):
            logger.info(f"🗑️ Service deleted: {service_id}")
        else:
            logger.info(f"Service {service_id} already absent, nothing to delete")
        return {"message": "Service deleted"}

    def delete_all_services(self) -> dict:
        """Clear the whole catalog"""
        deleted_count = self.repo.delete_all_services(self.store)
        logger.warning(f"🗑️ Catalog cleared: {deleted_count} service(s) removed")
        return {
            "message": f"Successfully deleted {deleted_count} service(s)",
            "deletedCount": deleted_count,
        }
