"""Catalog router - FastAPI endpoints for service catalog operations"""

import logging

from fastapi import APIRouter, Depends, status

from ...store import RecordStore, get_store
from .schemas import Service, ServiceCreate, ServiceUpdate
from .service import CatalogService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/services", tags=["Services"])


def get_catalog_service(store: RecordStore = Depends(get_store)) -> CatalogService:
    """Dependency injection for CatalogService"""
    return CatalogService(store)


@router.get("", response_model=list[Service])
async def get_services(service: CatalogService = Depends(get_catalog_service)):
    """List the whole catalog"""
    return service.get_services()


@router.get("/{service_id}", response_model=Service)
async def get_service(service_id: str, service: CatalogService = Depends(get_catalog_service)):
    return service.get_service(service_id)


@router.post("", response_model=Service, status_code=status.HTTP_201_CREATED)
async def create_service(data: ServiceCreate, service: CatalogService = Depends(get_catalog_service)):
    """Create a new service"""
    return service.create_service(data)


@router.put("/{service_id}", response_model=Service)
async def update_service(
    service_id: str,
    data: ServiceUpdate,
    service: CatalogService = Depends(get_catalog_service),
):
    """Merge partial fields into a service"""
    return service.update_service(service_id, data)


@router.delete("/{service_id}")
async def delete_service(service_id: str, service: CatalogService = Depends(get_catalog_service)):
    """Delete a service"""
    return service.delete_service(service_id)


@router.delete("")
async def delete_all_services(service: CatalogService = Depends(get_catalog_service)):
    """Clear the catalog (the client asks for confirmation first)"""
    return service.delete_all_services()
