"""Scheduling router - FastAPI endpoints for appointments"""

import asyncio
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from ...locks import SchedulingLock, get_scheduling_lock
from ...store import RecordStore, get_store
from .schemas import (
    Appointment,
    AppointmentCreate,
    AvailabilityRequest,
    AvailabilityResponse,
    QuoteRequest,
    QuoteResponse,
    StatusUpdate,
)
from .service import SchedulingService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/appointments", tags=["Appointments"])


def get_scheduling_service(
    store: RecordStore = Depends(get_store),
    lock: SchedulingLock = Depends(get_scheduling_lock),
) -> SchedulingService:
    """Dependency injection for SchedulingService"""
    return SchedulingService(store, lock=lock)


@router.get("", response_model=list[Appointment])
async def get_appointments(
    userId: Optional[str] = Query(None, description="Only appointments of this user"),
    service: SchedulingService = Depends(get_scheduling_service),
):
    """List appointments, most recent start first"""
    return service.get_appointments(userId)


@router.post("", response_model=Appointment, status_code=status.HTTP_201_CREATED)
async def create_appointment(
    data: AppointmentCreate,
    service: SchedulingService = Depends(get_scheduling_service),
):
    """Book an appointment"""
    # Waiting on the scheduling lock blocks; run in thread pool to not block the event loop
    return await asyncio.to_thread(
        service.create_appointment, data.userId, data.userName, data.serviceIds, data.startTime
    )


@router.post("/quote", response_model=QuoteResponse)
async def quote_appointment(
    data: QuoteRequest,
    service: SchedulingService = Depends(get_scheduling_service),
):
    """Price and duration of a selection of services"""
    return service.quote(data.serviceIds)


@router.post("/availability", response_model=AvailabilityResponse)
async def check_availability(
    data: AvailabilityRequest,
    service: SchedulingService = Depends(get_scheduling_service),
):
    """Whether a selection of services fits at a start time"""
    return service.check_availability(data.serviceIds, data.startTime)


@router.get("/{appointment_id}", response_model=Appointment)
async def get_appointment(
    appointment_id: str,
    service: SchedulingService = Depends(get_scheduling_service),
):
    return service.get_appointment(appointment_id)


@router.patch("/{appointment_id}/status")
async def update_appointment_status(
    appointment_id: str,
    data: StatusUpdate,
    service: SchedulingService = Depends(get_scheduling_service),
):
    """Change the status of an appointment"""
    service.update_status(appointment_id, data.status)
    return {"message": "Appointment status updated"}
