"""Database models."""

from hustle_village.models.booking import Booking
from hustle_village.models.profile import Profile
from hustle_village.models.request import ServiceRequest
from hustle_village.models.seller import Seller
from hustle_village.models.service import SERVICE_CATEGORIES, Service

__all__ = [
    "Booking",
    "Profile",
    "SERVICE_CATEGORIES",
    "Seller",
    "Service",
    "ServiceRequest",
]
