"""Schémas Rapports financiers / Financial report schemas."""

from pydantic import BaseModel

from rental_app.schemas.car import CarStats
from rental_app.schemas.notification import Notification
from rental_app.schemas.rental import RentalWithJoinedNames


class ProfitSummary(BaseModel):
    total_revenue: float = 0.0
    total_expenses: float = 0.0
    total_profit: float = 0.0


class ProfitReport(ProfitSummary):
    rentals: list[RentalWithJoinedNames] = []


class DashboardResponse(ProfitSummary):
    car_stats: CarStats
    notifications: list[Notification] = []
