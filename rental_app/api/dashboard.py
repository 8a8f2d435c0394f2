"""Routes Tableau de bord / Dashboard routes."""

from fastapi import APIRouter, Depends, Request

from rental_app.config import settings
from rental_app.rate_limit import limiter
from rental_app.schemas.finance import DashboardResponse
from rental_app.services.car_status import CarStatusSynchronizer
from rental_app.services.finance_service import FinanceService
from rental_app.services.notification_service import NotificationService
from rental_app.api.deps import get_finance_service, get_notification_service, get_synchronizer

router = APIRouter()


@router.get("/", response_model=DashboardResponse)
@limiter.limit(settings.RATE_LIMIT_DEFAULT)
async def dashboard(
    request: Request,
    synchronizer: CarStatusSynchronizer = Depends(get_synchronizer),
    finance: FinanceService = Depends(get_finance_service),
    notifications: NotificationService = Depends(get_notification_service),
):
    """Stats parc + finances + notifications / Fleet stats, finances and notices."""
    summary = await finance.summary()
    return DashboardResponse(
        **summary.model_dump(),
        car_stats=await synchronizer.car_stats(),
        notifications=await notifications.get_notifications(),
    )
