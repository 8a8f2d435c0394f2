"""Routes Depenses / Expense routes."""

from fastapi import APIRouter, Depends, Request

from rental_app.config import settings
from rental_app.exceptions import NotFoundError
from rental_app.rate_limit import limiter
from rental_app.schemas.expense import ExpenseCreate, ExpenseRead, ExpenseWithCar
from rental_app.services.expense_service import ExpenseService
from rental_app.api.deps import get_expense_service

router = APIRouter()


@router.get("/", response_model=list[ExpenseWithCar])
async def list_expenses(service: ExpenseService = Depends(get_expense_service)):
    return await service.list_expenses()


@router.post("/", response_model=ExpenseRead, status_code=201)
@limiter.limit(settings.RATE_LIMIT_WRITE)
async def create_expense(
    request: Request,
    data: ExpenseCreate,
    service: ExpenseService = Depends(get_expense_service),
):
    return await service.create_expense(**data.model_dump())


@router.delete("/{expense_id}", status_code=204)
async def delete_expense(expense_id: int, service: ExpenseService = Depends(get_expense_service)):
    if not await service.delete_expense(expense_id):
        raise NotFoundError("expenses", expense_id)
