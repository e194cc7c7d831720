"""Scheduling service - Appointment creation, conflict detection and status changes"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from ...config import APPOINTMENT_STRICT_STATUS_LOOKUP, ENFORCE_STATUS_TRANSITIONS
from ...errors import ConflictError, NotFoundError, ValidationError
from ...locks import SchedulingLock
from ...security_utils import generate_record_id
from ...store import RecordStore
from ..catalog.repository import ServiceRepository
from ..catalog.schemas import Service
from .overlap import Interval, find_conflicts
from .repository import AppointmentRepository
from .schemas import (
    Appointment,
    AvailabilityResponse,
    QuoteResponse,
    ensure_utc,
)
from .status import INITIAL_STATUS, AppointmentStatus, validate_status_transition

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SchedulingService:
    """Service layer for the appointment schedule of a single resource"""

    def __init__(
        self,
        store: RecordStore,
        lock: Optional[SchedulingLock] = None,
        clock: Callable[[], datetime] = utc_now,
        strict_status_lookup: bool = APPOINTMENT_STRICT_STATUS_LOOKUP,
        enforce_transitions: bool = ENFORCE_STATUS_TRANSITIONS,
    ):
        self.store = store
        self.lock = lock or SchedulingLock()
        self.clock = clock
        self.strict_status_lookup = strict_status_lookup
        self.enforce_transitions = enforce_transitions
        self.repo = AppointmentRepository()
        self.services_repo = ServiceRepository()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_appointments(self, user_id: Optional[str] = None) -> list[Appointment]:
        """All appointments (or one user's), most recent start first"""
        appointments = self.repo.get_appointments(self.store, user_id)
        return sorted(appointments, key=lambda a: a.startTime, reverse=True)

    def get_appointment(self, appointment_id: str) -> Appointment:
        appointment = self.repo.get_appointment_by_id(self.store, appointment_id)
        if not appointment:
            raise NotFoundError("appointment not found")
        return appointment

    # ------------------------------------------------------------------
    # Booking pipeline
    # ------------------------------------------------------------------

    def resolve_services(self, service_ids: list[str]) -> list[Service]:
        """
        Resolve the selected ids against the current catalog.

        Duplicates are collapsed, selection order is kept.

        Raises:
            ValidationError: If nothing is selected or an id is not in the catalog
        """
        unique_ids = list(dict.fromkeys(str(s) for s in service_ids))
        if not unique_ids:
            raise ValidationError("no services selected")

        catalog = {s.id: s for s in self.services_repo.get_services(self.store)}
        missing = [s for s in unique_ids if s not in catalog]
        if missing:
            raise ValidationError(f"unknown services: {', '.join(missing)}")

        return [catalog[s] for s in unique_ids]

    def quote(self, service_ids: list[str]) -> QuoteResponse:
        """Totals a booking of these services would freeze"""
        services = self.resolve_services(service_ids)
        return QuoteResponse(
            serviceIds=[s.id for s in services],
            services=services,
            totalPrice=sum(s.price for s in services),
            totalDuration=sum(s.durationMinutes for s in services),
        )

    def check_availability(self, service_ids: list[str], start_time: datetime) -> AvailabilityResponse:
        """Run the booking checks without writing anything"""
        quote = self.quote(service_ids)
        requested = self._requested_interval(start_time, quote.totalDuration)
        conflicts = find_conflicts(requested, self.repo.get_appointments(self.store))

        return AvailabilityResponse(
            available=not conflicts,
            startTime=requested.start,
            endTime=requested.end,
            totalDuration=quote.totalDuration,
            conflictingAppointmentIds=[c.id for c in conflicts],
            message=None if not conflicts else "time slot unavailable",
        )

    def create_appointment(
        self,
        user_id: str,
        user_name: str,
        service_ids: list[str],
        start_time: datetime,
    ) -> Appointment:
        """
        Validate and book an appointment.

        Either a complete, non-conflicting appointment is persisted or nothing is.

        Raises:
            ValidationError: No services selected or unknown service ids
            ConflictError: The interval overlaps an active appointment
            SchedulingBusyError: The scheduling lock could not be acquired
        """
        with self.lock.hold():
            # 1-2. Resolve services and freeze totals
            quote = self.quote(service_ids)

            # 3. Requested interval
            requested = self._requested_interval(start_time, quote.totalDuration)

            # 4. Conflict check against active appointments
            conflicts = find_conflicts(requested, self.repo.get_appointments(self.store))
            if conflicts:
                logger.warning(
                    f"⚠️ Booking conflict for user {user_id}: "
                    f"{requested.start.isoformat()} - {requested.end.isoformat()} "
                    f"overlaps {[c.id for c in conflicts]}"
                )
                raise ConflictError("time slot unavailable")

            # 5. Persist
            appointment = Appointment(
                id=generate_record_id(),
                userId=user_id,
                userName=user_name,
                serviceIds=quote.serviceIds,
                totalPrice=quote.totalPrice,
                totalDuration=quote.totalDuration,
                startTime=requested.start,
                endTime=requested.end,
                status=INITIAL_STATUS,
                createdAt=self.clock(),
            )
            created = self.repo.create_appointment(self.store, appointment)

        logger.info(
            f"📅 Appointment {created.id} booked for user {user_id}: "
            f"{created.startTime.isoformat()} ({created.totalDuration} min, {created.totalPrice:.2f})"
        )
        return created

    @staticmethod
    def _requested_interval(start_time: datetime, total_duration: int) -> Interval:
        start = ensure_utc(start_time)
        return Interval(start, start + timedelta(minutes=total_duration))

    # ------------------------------------------------------------------
    # Status changes
    # ------------------------------------------------------------------

    def update_status(self, appointment_id: str, new_status: AppointmentStatus) -> Optional[Appointment]:
        """
        Overwrite the status of an appointment.

        Other appointments are never re-validated; a cancelled interval simply
        stops counting for future conflict checks.

        Returns:
            The updated appointment, or None when the id is unknown and strict
            lookup is disabled
        """
        appointment = self.repo.get_appointment_by_id(self.store, appointment_id)
        if not appointment:
            if self.strict_status_lookup:
                raise NotFoundError("appointment not found")
            logger.warning(f"⚠️ Status update ignored: appointment {appointment_id} not found")
            return None

        new_status = AppointmentStatus(new_status)
        if self.enforce_transitions and not validate_status_transition(appointment.status, new_status):
            raise ValidationError(
                f"cannot change status from {appointment.status.value} to {new_status.value}"
            )

        previous = appointment.status
        appointment.status = new_status
        updated = self.repo.update_appointment(self.store, appointment)
        if updated is None:
            raise NotFoundError("appointment not found")

        logger.info(f"✅ Appointment {appointment_id} transitioned: {previous.value} → {new_status.value}")
        return updated
