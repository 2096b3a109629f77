"""Tests for the booking state machine."""

import pytest

from hustle_village.core.exceptions import InvalidBookingStatus, ValidationError
from hustle_village.domain.booking_state import (
    BOOKING_STATUSES,
    BOOKING_TRANSITIONS,
    INITIAL_BOOKING_STATUS,
    assert_booking_transition,
    resolve_initial_status,
)


@pytest.mark.unit
class TestBookingTransitions:
    def test_pending_can_be_accepted(self):
        assert_booking_transition("pending", "accepted")

    @pytest.mark.parametrize("current", ["accepted", "completed", "cancelled"])
    def test_only_pending_can_be_accepted(self, current):
        with pytest.raises(InvalidBookingStatus) as exc_info:
            assert_booking_transition(current, "accepted")
        assert exc_info.value.detail == f"Cannot accept booking with status: {current}"
        assert exc_info.value.status_code == 400

    def test_no_operation_reaches_terminal_states(self):
        for targets in BOOKING_TRANSITIONS.values():
            assert "completed" not in targets
            assert "cancelled" not in targets

    def test_every_status_has_a_transition_entry(self):
        assert set(BOOKING_TRANSITIONS) == set(BOOKING_STATUSES)


@pytest.mark.unit
class TestInitialStatus:
    def test_defaults_to_pending(self):
        assert resolve_initial_status(None) == INITIAL_BOOKING_STATUS

    def test_echoing_pending_is_allowed(self):
        assert resolve_initial_status("pending") == "pending"

    def test_later_status_is_rejected(self):
        with pytest.raises(ValidationError, match="must start in 'pending'"):
            resolve_initial_status("accepted")

    def test_unknown_status_is_rejected(self):
        with pytest.raises(ValidationError, match="Invalid booking status: paid"):
            resolve_initial_status("paid")
