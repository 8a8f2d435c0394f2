"""
Endpoints de rapports financiers / Financial report endpoints.
Lecture seule, agrégats recalculés à chaque appel.
Read-only, aggregates recomputed on every call.
"""

from fastapi import APIRouter, Depends

from rental_app.schemas.finance import ProfitReport
from rental_app.services.finance_service import FinanceService
from rental_app.services.rental_service import RentalService
from rental_app.api.deps import get_finance_service, get_rental_service

router = APIRouter()


@router.get("/", response_model=ProfitReport)
async def profit_report(
    finance: FinanceService = Depends(get_finance_service),
    rentals: RentalService = Depends(get_rental_service),
):
    """Revenus, dépenses, bénéfice + locations / Revenue, expenses, profit and rentals."""
    summary = await finance.summary()
    return ProfitReport(**summary.model_dump(), rentals=await rentals.list_rentals())
