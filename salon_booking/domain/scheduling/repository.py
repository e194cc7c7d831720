"""Scheduling repository - Record store operations for appointments"""

from typing import Optional

from ...store import APPOINTMENTS, RecordStore
from .schemas import Appointment


class AppointmentRepository:
    """Repository for appointment records"""

    @staticmethod
    def get_appointments(store: RecordStore, user_id: Optional[str] = None) -> list[Appointment]:
        """Get all appointments, optionally only those of one user"""
        appointments = [Appointment(**record) for record in store.list(APPOINTMENTS)]
        if user_id is not None:
            appointments = [a for a in appointments if a.userId == user_id]
        return appointments

    @staticmethod
    def get_appointment_by_id(store: RecordStore, appointment_id: str) -> Optional[Appointment]:
        """Get a specific appointment by ID"""
        record = store.get(APPOINTMENTS, str(appointment_id))
        return Appointment(**record) if record else None

    @staticmethod
    def create_appointment(store: RecordStore, appointment: Appointment) -> Appointment:
        """Persist a new appointment"""
        record = store.insert(APPOINTMENTS, appointment.id, appointment.model_dump(mode="json"))
        return Appointment(**record)

    @staticmethod
    def update_appointment(store: RecordStore, appointment: Appointment) -> Optional[Appointment]:
        """Replace a stored appointment"""
        record = store.update(APPOINTMENTS, appointment.id, appointment.model_dump(mode="json"))
        return Appointment(**record) if record else None
