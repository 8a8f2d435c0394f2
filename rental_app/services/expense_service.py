"""
Service Depenses / Expense service.
"""

import logging

from sqlalchemy import select

from rental_app.models import Car, Expense
from rental_app.schemas.expense import ExpenseRead, ExpenseWithCar
from rental_app.services.audit_service import AuditAction, ChangeHook
from rental_app.services.document_store import DocumentStore, store_errors
from rental_app.utils.validation import now_iso, parse_amount, parse_iso_date, require_fields

logger = logging.getLogger(__name__)


class ExpenseService:
    """Depenses du parc / Fleet expenses."""

    def __init__(self, store: DocumentStore, on_change: ChangeHook | None = None):
        self.store = store
        self.on_change = on_change

    async def list_expenses(self) -> list[ExpenseWithCar]:
        """Depenses jointes a leur voiture, plus recentes d'abord / Expenses with their car, latest date first."""
        query = (
            select(Expense, Car.model, Car.plate_number)
            .outerjoin(Car, Car.id == Expense.car_id)
            .order_by(Expense.expense_date.desc(), Expense.id.desc())
        )
        with store_errors("aggregate", "expenses"):
            result = await self.store.session.execute(query)
            rows = result.all()
        return [
            ExpenseWithCar(
                **ExpenseRead.model_validate(expense).model_dump(),
                car_model=car_model,
                plate_number=plate_number,
            )
            for expense, car_model, plate_number in rows
        ]

    async def create_expense(
        self,
        category: str | None,
        amount,
        expense_date: str | None,
        car_id: int | None = None,
        description: str | None = None,
    ) -> ExpenseRead:
        """Enregistrer une depense ; montant illisible -> 0 / Record an expense; unparsable amount -> 0."""
        require_fields(category=category, expense_date=expense_date)
        parse_iso_date(expense_date, "expense_date")
        value = parse_amount(amount, "amount")

        expense_id = await self.store.insert_one("expenses", {
            "category": category,
            "amount": value,
            "expense_date": expense_date,
            "car_id": car_id or None,
            "description": description or None,
            "created_at": now_iso(),
        })
        logger.info("Expense %s created: %s %.2f", expense_id, category, value)
        expense = await self.store.find_one("expenses", {"id": expense_id})
        if self.on_change:
            await self.on_change("expense", AuditAction.CREATE, ExpenseRead.model_validate(expense).model_dump())
        return ExpenseRead.model_validate(expense)

    async def delete_expense(self, expense_id: int) -> bool:
        expense = await self.store.find_one("expenses", {"id": expense_id})
        if expense is None:
            return False
        snapshot = ExpenseRead.model_validate(expense).model_dump()
        await self.store.delete_one("expenses", {"id": expense_id})
        logger.info("Expense %s deleted", expense_id)
        if self.on_change:
            await self.on_change("expense", AuditAction.DELETE, snapshot)
        return True
