"""Booking state machine.

States: pending → accepted. ``completed`` and ``cancelled`` are valid stored
values but no operation moves a booking into them yet.
"""

from hustle_village.core.exceptions import InvalidBookingStatus, ValidationError

BOOKING_STATUSES = ("pending", "accepted", "completed", "cancelled")

INITIAL_BOOKING_STATUS = "pending"

TRANSITION_VERBS = {
    "accepted": "accept",
    "completed": "complete",
    "cancelled": "cancel",
}

BOOKING_TRANSITIONS: dict[str, set[str]] = {
    "pending": {"accepted"},
    "accepted": set(),
    "completed": set(),  # Terminal state
    "cancelled": set(),  # Terminal state
}


def assert_booking_transition(current_status: str, new_status: str) -> None:
    """Validate booking state transition."""
    allowed = BOOKING_TRANSITIONS.get(current_status, set())
    if new_status not in allowed:
        verb = TRANSITION_VERBS.get(new_status, f"move to {new_status}")
        raise InvalidBookingStatus(f"Cannot {verb} booking with status: {current_status}")


def resolve_initial_status(requested: str | None) -> str:
    """Return the status a new booking is stored with.

    Callers may echo ``pending`` but cannot start a booking further along
    the lifecycle.
    """
    if requested is None or requested == INITIAL_BOOKING_STATUS:
        return INITIAL_BOOKING_STATUS
    if requested not in BOOKING_STATUSES:
        raise ValidationError(f"Invalid booking status: {requested}")
    raise ValidationError(
        f"New bookings must start in '{INITIAL_BOOKING_STATUS}' status, got '{requested}'"
    )
