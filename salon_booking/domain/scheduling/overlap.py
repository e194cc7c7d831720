"""
Overlap Detection

Detects scheduling conflicts between a requested interval and the existing
appointments of the single scheduling resource.

Intervals are half-open, [start, end): an appointment ending exactly when
another starts does not overlap it.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable

from .schemas import Appointment
from .status import AppointmentStatus


@dataclass(frozen=True)
class Interval:
    """Half-open time interval [start, end)"""

    start: datetime
    end: datetime

    def __post_init__(self):
        if self.end <= self.start:
            raise ValueError("interval end must be after its start")

    def overlaps(self, other: "Interval") -> bool:
        return overlaps(self.start, self.end, other.start, other.end)


def overlaps(start_a: datetime, end_a: datetime, start_b: datetime, end_b: datetime) -> bool:
    """
    Standard interval-intersection test.

    Both comparisons are strict, so touching boundaries are not an overlap.
    """
    return start_a < end_b and start_b < end_a


def blocks_schedule(appointment: Appointment) -> bool:
    """Cancelled appointments no longer hold their slot"""
    return appointment.status != AppointmentStatus.CANCELLED


def find_conflicts(requested: Interval, appointments: Iterable[Appointment]) -> list[Appointment]:
    """
    Return the active appointments whose interval intersects the requested one.

    Linear in the number of appointments. Stored timestamps are compared as they
    are, so a record with an empty or inverted interval never raises here.
    """
    return [
        appt
        for appt in appointments
        if blocks_schedule(appt) and overlaps(requested.start, requested.end, appt.startTime, appt.endTime)
    ]
