"""Booking eligibility rules for services."""

from uuid import UUID

from hustle_village.models.service import Service


def can_book_service(service: Service, acting_user_id: UUID) -> tuple[bool, str | None]:
    """Check whether ``acting_user_id`` may book ``service``.

    Rules are evaluated in order and the first failure wins.
    """
    if not service.is_verified:
        return False, "Cannot book unverified service"
    if not service.is_active:
        return False, "Cannot book inactive service"
    if is_service_owner(service, acting_user_id):
        return False, "Cannot book your own service"
    return True, None


def is_service_owner(service: Service, acting_user_id: UUID) -> bool:
    """Check if the acting user listed the service."""
    return service.user_id == acting_user_id
