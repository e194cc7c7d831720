"""Scheduling domain schemas - Pydantic models for validation"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ..catalog.schemas import Service
from .status import AppointmentStatus


def ensure_utc(value: datetime) -> datetime:
    """Naive datetimes are taken as UTC; aware ones are converted to UTC"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class Appointment(BaseModel):
    """A booked interval, as stored"""

    id: str
    userId: str
    userName: str
    serviceIds: list[str]
    totalPrice: float
    totalDuration: int
    startTime: datetime
    endTime: datetime
    status: AppointmentStatus
    createdAt: datetime

    @field_validator("startTime", "endTime", "createdAt")
    @classmethod
    def normalize_timestamps(cls, v):
        return ensure_utc(v)


class AppointmentCreate(BaseModel):
    """Schema for a booking request"""

    userId: str = Field(min_length=1)
    userName: str = Field(min_length=1, max_length=200)
    serviceIds: list[str]
    startTime: datetime

    @field_validator("startTime")
    @classmethod
    def normalize_start(cls, v):
        return ensure_utc(v)


class StatusUpdate(BaseModel):
    """Schema for an appointment status change"""

    status: AppointmentStatus


class QuoteRequest(BaseModel):
    """Schema for pricing a selection of services without booking"""

    serviceIds: list[str]


class QuoteResponse(BaseModel):
    serviceIds: list[str]
    services: list[Service]
    totalPrice: float
    totalDuration: int


class AvailabilityRequest(BaseModel):
    """Schema for checking whether a slot can be booked"""

    serviceIds: list[str]
    startTime: datetime

    @field_validator("startTime")
    @classmethod
    def normalize_start(cls, v):
        return ensure_utc(v)


class AvailabilityResponse(BaseModel):
    available: bool
    startTime: datetime
    endTime: datetime
    totalDuration: int
    conflictingAppointmentIds: list[str] = []
    message: Optional[str] = None
