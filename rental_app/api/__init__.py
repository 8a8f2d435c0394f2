"""Routes API / API routes."""

from fastapi import APIRouter

from rental_app.api import (
    cars,
    clients,
    rentals,
    expenses,
    profits,
    dashboard,
    notifications,
    audit,
)

api_router = APIRouter(prefix="/api")

api_router.include_router(cars.router, prefix="/cars", tags=["cars"])
api_router.include_router(clients.router, prefix="/clients", tags=["clients"])
api_router.include_router(rentals.router, prefix="/rentals", tags=["rentals"])
api_router.include_router(expenses.router, prefix="/expenses", tags=["expenses"])
api_router.include_router(profits.router, prefix="/profits", tags=["profits"])
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
api_router.include_router(notifications.router, prefix="/notifications", tags=["notifications"])
api_router.include_router(audit.router, prefix="/audit", tags=["audit"])
