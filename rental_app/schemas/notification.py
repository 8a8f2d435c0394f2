"""Schémas Notifications / Notification schemas."""

import enum

from pydantic import BaseModel


class NoticeType(str, enum.Enum):
    """Type de notification / Notice type."""
    START_TODAY = "start_today"
    START_TOMORROW = "start_tomorrow"
    RETURN_TODAY = "return_today"
    OVERDUE = "overdue"


class NoticeSeverity(str, enum.Enum):
    """Severite / Severity."""
    INFO = "info"
    WARNING = "warning"
    DANGER = "danger"


class NoticeRental(BaseModel):
    """Instantane denormalise de la location / Denormalized rental snapshot."""
    id: int
    model: str
    plate_number: str
    full_name: str
    start_date: str
    return_date: str
    status: str


class Notification(BaseModel):
    type: NoticeType
    severity: NoticeSeverity
    rental: NoticeRental
