"""Tests for appointment status changes"""

import pytest

from salon_booking.domain.scheduling.service import SchedulingService
from salon_booking.domain.scheduling.status import (
    AppointmentStatus,
    validate_status_transition,
)
from salon_booking.errors import ConflictError, NotFoundError, ValidationError
from salon_booking.store import APPOINTMENTS
from tests.conftest import at


def book(scheduling, start, user_id="u1"):
    return scheduling.create_appointment(user_id, "Ana", ["1"], start)


class TestTransitionTable:
    def test_confirmed_can_complete_or_cancel(self):
        assert validate_status_transition(AppointmentStatus.CONFIRMED, AppointmentStatus.COMPLETED)
        assert validate_status_transition(AppointmentStatus.CONFIRMED, AppointmentStatus.CANCELLED)

    def test_terminal_statuses_are_final(self):
        assert not validate_status_transition(AppointmentStatus.CANCELLED, AppointmentStatus.CONFIRMED)
        assert not validate_status_transition(AppointmentStatus.COMPLETED, AppointmentStatus.CANCELLED)

    def test_same_status_is_always_allowed(self):
        for status in AppointmentStatus:
            assert validate_status_transition(status, status)


class TestUpdateStatus:
    def test_cancel_appointment(self, scheduling):
        appointment = book(scheduling, at(10))

        updated = scheduling.update_status(appointment.id, AppointmentStatus.CANCELLED)

        assert updated.status == AppointmentStatus.CANCELLED
        assert scheduling.get_appointment(appointment.id).status == AppointmentStatus.CANCELLED

    def test_status_accepts_plain_strings(self, scheduling):
        appointment = book(scheduling, at(10))

        updated = scheduling.update_status(appointment.id, "COMPLETED")

        assert updated.status == AppointmentStatus.COMPLETED

    def test_only_status_changes(self, scheduling):
        appointment = book(scheduling, at(10))

        updated = scheduling.update_status(appointment.id, AppointmentStatus.COMPLETED)

        assert updated.model_dump(exclude={"status"}) == appointment.model_dump(exclude={"status"})

    def test_any_status_may_follow_any_other_by_default(self, catalog, lock):
        scheduling = SchedulingService(catalog, lock=lock, enforce_transitions=False)
        appointment = book(scheduling, at(10))

        scheduling.update_status(appointment.id, AppointmentStatus.CANCELLED)
        restored = scheduling.update_status(appointment.id, AppointmentStatus.CONFIRMED)

        assert restored.status == AppointmentStatus.CONFIRMED

    def test_reverting_a_cancellation_does_not_revalidate_others(self, catalog, lock):
        """A cancelled slot can be re-taken and the old appointment later restored"""
        scheduling = SchedulingService(catalog, lock=lock, enforce_transitions=False)
        first = book(scheduling, at(10))
        scheduling.update_status(first.id, AppointmentStatus.CANCELLED)
        book(scheduling, at(10), user_id="u2")

        restored = scheduling.update_status(first.id, AppointmentStatus.CONFIRMED)

        assert restored.status == AppointmentStatus.CONFIRMED
        with pytest.raises(ConflictError):
            book(scheduling, at(10), user_id="u3")


class TestUnknownAppointment:
    def test_strict_lookup_raises_not_found(self, catalog, lock):
        scheduling = SchedulingService(catalog, lock=lock, strict_status_lookup=True)

        with pytest.raises(NotFoundError) as exc_info:
            scheduling.update_status("missing", AppointmentStatus.CANCELLED)

        assert exc_info.value.message == "appointment not found"

    def test_lenient_lookup_is_a_no_op(self, catalog, lock):
        scheduling = SchedulingService(catalog, lock=lock, strict_status_lookup=False)

        assert scheduling.update_status("missing", AppointmentStatus.CANCELLED) is None
        assert catalog.list(APPOINTMENTS) == []


class TestEnforcedTransitions:
    @pytest.fixture
    def strict(self, catalog, lock):
        return SchedulingService(catalog, lock=lock, enforce_transitions=True)

    def test_allowed_transition(self, strict):
        appointment = book(strict, at(10))

        assert strict.update_status(appointment.id, AppointmentStatus.COMPLETED).status == AppointmentStatus.COMPLETED

    def test_disallowed_transition_is_rejected(self, strict):
        appointment = book(strict, at(10))
        strict.update_status(appointment.id, AppointmentStatus.CANCELLED)

        with pytest.raises(ValidationError):
            strict.update_status(appointment.id, AppointmentStatus.CONFIRMED)

        assert strict.get_appointment(appointment.id).status == AppointmentStatus.CANCELLED

    def test_repeating_the_current_status_is_allowed(self, strict):
        appointment = book(strict, at(10))

        assert strict.update_status(appointment.id, AppointmentStatus.CONFIRMED).status == AppointmentStatus.CONFIRMED
