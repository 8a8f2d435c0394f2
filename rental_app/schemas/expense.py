"""Schemas Depenses / Expense schemas."""

from pydantic import BaseModel


class ExpenseCreate(BaseModel):
    category: str | None = None
    amount: float | str | None = None
    expense_date: str | None = None
    car_id: int | None = None
    description: str | None = None


class ExpenseRead(BaseModel):
    id: int
    category: str
    amount: float
    expense_date: str
    car_id: int | None = None
    description: str | None = None
    created_at: str

    model_config = {"from_attributes": True}


class ExpenseWithCar(ExpenseRead):
    """Depense jointe a sa voiture (optionnelle) / Expense joined with its optional car."""
    car_model: str | None = None
    plate_number: str | None = None
