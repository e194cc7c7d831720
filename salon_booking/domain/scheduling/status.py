"""
Appointment statuses and the optional transition guard.

Appointment statuses: PENDING → CONFIRMED → COMPLETED/CANCELLED

Note:
- Booking always produces CONFIRMED; PENDING is kept for a future approval flow
- By default any status may be set over any other; the table below is only
  applied when transition enforcement is switched on
"""

from enum import Enum


class AppointmentStatus(str, Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"
    COMPLETED = "COMPLETED"


INITIAL_STATUS = AppointmentStatus.CONFIRMED

VALID_TRANSITIONS: dict[AppointmentStatus, frozenset[AppointmentStatus]] = {
    AppointmentStatus.PENDING: frozenset({AppointmentStatus.CONFIRMED, AppointmentStatus.CANCELLED}),
    AppointmentStatus.CONFIRMED: frozenset({AppointmentStatus.CANCELLED, AppointmentStatus.COMPLETED}),
    AppointmentStatus.CANCELLED: frozenset(),  # Terminal state
    AppointmentStatus.COMPLETED: frozenset(),  # Terminal state
}


def validate_status_transition(current_status: AppointmentStatus, new_status: AppointmentStatus) -> bool:
    """
    Validate if an appointment status transition is allowed

    Args:
        current_status: Current appointment status
        new_status: Desired new status

    Returns:
        bool: True if transition is valid, False otherwise
    """
    if current_status == new_status:
        return True
    return new_status in VALID_TRANSITIONS.get(current_status, frozenset())
