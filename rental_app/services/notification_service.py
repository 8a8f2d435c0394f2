"""
Service de notifications / Notification service.

Notifications derivees des dates de location, recalculees a chaque lecture,
jamais stockees. Notices derived from rental dates on every read, never
persisted.

    start_today     reserved, start_date == today      warning
    start_tomorrow  reserved, start_date == tomorrow   info
    return_today    rented, return_date == today       warning
    overdue         rented, return_date < today        danger

Les dates sont des chaines YYYY-MM-DD : la comparaison lexicographique suffit.
Dates are YYYY-MM-DD strings, so lexicographic comparison is enough.
"""

from datetime import date, timedelta

from rental_app.models import ACTIVE_RENTAL_STATUSES, RentalStatus
from rental_app.schemas.notification import NoticeRental, NoticeSeverity, NoticeType, Notification
from rental_app.schemas.rental import RentalWithJoinedNames
from rental_app.services.rental_service import RentalService
from rental_app.utils.validation import today_utc


def derive_notifications(rentals: list[RentalWithJoinedNames], today: date) -> list[Notification]:
    """Calculer les notifications d'un jour donne / Compute the notices for a given day."""
    today_str = today.isoformat()
    tomorrow_str = (today + timedelta(days=1)).isoformat()

    notices = []
    for rental in rentals:
        notice = None
        if rental.status == RentalStatus.RESERVED.value:
            if rental.start_date == today_str:
                notice = (NoticeType.START_TODAY, NoticeSeverity.WARNING)
            elif rental.start_date == tomorrow_str:
                notice = (NoticeType.START_TOMORROW, NoticeSeverity.INFO)
        elif rental.status == RentalStatus.RENTED.value:
            if rental.return_date == today_str:
                notice = (NoticeType.RETURN_TODAY, NoticeSeverity.WARNING)
            elif rental.return_date < today_str:
                notice = (NoticeType.OVERDUE, NoticeSeverity.DANGER)

        if notice is None:
            continue
        notice_type, severity = notice
        notices.append(Notification(
            type=notice_type,
            severity=severity,
            rental=NoticeRental(
                id=rental.id,
                model=rental.car_model,
                plate_number=rental.plate_number,
                full_name=rental.client_name,
                start_date=rental.start_date,
                return_date=rental.return_date,
                status=rental.status,
            ),
        ))
    return notices


class NotificationService:
    """Notifications a la demande / On-demand notices."""

    def __init__(self, rental_service: RentalService):
        self.rental_service = rental_service

    async def get_notifications(self, today: date | None = None) -> list[Notification]:
        """Notifications du jour (UTC par defaut) / Notices for today (UTC wall clock by default)."""
        day = today or today_utc()
        rentals = [
            r for r in await self.rental_service.list_rentals()
            if r.status in ACTIVE_RENTAL_STATUSES
        ]
        return derive_notifications(rentals, day)
