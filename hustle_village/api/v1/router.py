"""Main API router that includes all endpoint routers."""

from fastapi import APIRouter

from hustle_village.api.v1 import bookings, products, requests, seller

api_router = APIRouter()

# Bookings
api_router.include_router(bookings.router, prefix="/bookings", tags=["Bookings"])

# Seller service management
api_router.include_router(seller.router, prefix="/seller", tags=["Seller"])

# Product catalog
api_router.include_router(products.router, prefix="/products", tags=["Products"])

# Service requests
api_router.include_router(requests.router, prefix="/requests", tags=["Requests"])
