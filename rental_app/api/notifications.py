"""Routes Notifications / Notification API routes."""

from datetime import date

from fastapi import APIRouter, Depends, Query

from rental_app.schemas.notification import Notification
from rental_app.services.notification_service import NotificationService
from rental_app.api.deps import get_notification_service

router = APIRouter()


@router.get("/", response_model=list[Notification])
async def list_notifications(
    today: date | None = Query(default=None),
    service: NotificationService = Depends(get_notification_service),
):
    """Notifications du jour (UTC par défaut) / Notices for the given day (UTC today by default)."""
    return await service.get_notifications(today)
