"""Custom validation utilities."""

from datetime import UTC, date, datetime, time

from hustle_village.core.exceptions import ValidationError


def utcnow() -> datetime:
    """Current wall-clock time in UTC."""
    return datetime.now(UTC)


def _parse_iso(value: str) -> datetime:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("Date and time are required")

    cleaned = value.strip()
    try:
        if len(cleaned) == 10:
            parsed_date = date.fromisoformat(cleaned)
            return datetime.combine(parsed_date, time.min, tzinfo=UTC)
        parsed = datetime.fromisoformat(cleaned)
    except ValueError:
        raise ValidationError("Invalid date format")

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed


def parse_booking_date(value: str) -> datetime:
    """Parse a booking date into an aware UTC datetime.

    Accepted formats:
    - 2026-10-20 (date only, midnight UTC)
    - 2026-10-20T14:30:00Z / with offset (converted to UTC)
    - 2026-10-20T14:30:00 (naive, treated as UTC)

    Raises:
        ValidationError: If the value cannot be parsed
    """
    return _parse_iso(value).astimezone(UTC)


def booking_day(value: str) -> date:
    """Calendar day of a booking date as the caller wrote it.

    Offsets are not applied, so ``2026-10-20T01:00:00+05:00`` is the 20th.
    """
    return _parse_iso(value).date()


def ensure_future(moment: datetime, now: datetime | None = None) -> None:
    """Require ``moment`` to be strictly after ``now``.

    A value equal to the current instant is rejected.
    """
    current = now or utcnow()
    if moment <= current:
        raise ValidationError("Booking date must be in the future")


def parse_booking_time(value: str) -> str:
    """Validate a clock time (HH:MM or HH:MM:SS) and return it normalised."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("Date and time are required")

    cleaned = value.strip()
    if len(cleaned) not in (5, 8):
        raise ValidationError("Invalid time format")
    try:
        parsed = time.fromisoformat(cleaned)
    except ValueError:
        raise ValidationError("Invalid time format")

    if len(cleaned) == 5:
        return parsed.strftime("%H:%M")
    return parsed.strftime("%H:%M:%S")
