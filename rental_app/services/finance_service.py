"""
Service financier / Financial aggregation service.
"""

from rental_app.schemas.finance import ProfitSummary
from rental_app.services.document_store import DocumentStore


class FinanceService:
    """Revenus, depenses et benefice / Revenue, expenses and profit."""

    def __init__(self, store: DocumentStore):
        self.store = store

    @staticmethod
    def profit(revenue: float, expenses: float) -> float:
        """Benefice, peut etre negatif / Profit, may be negative."""
        return round(revenue - expenses, 2)

    async def total_revenue(self) -> float:
        """
        Somme des prix de location, tous statuts confondus.
        Sum of rental prices over every status, reserved rentals included.
        """
        return round(await self.store.sum("rentals", "rental_price"), 2)

    async def total_expenses(self) -> float:
        return round(await self.store.sum("expenses", "amount"), 2)

    async def total_profit(self) -> float:
        return self.profit(await self.total_revenue(), await self.total_expenses())

    async def summary(self) -> ProfitSummary:
        revenue = await self.total_revenue()
        expenses = await self.total_expenses()
        return ProfitSummary(
            total_revenue=revenue,
            total_expenses=expenses,
            total_profit=self.profit(revenue, expenses),
        )
