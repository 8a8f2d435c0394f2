"""
Modèles SQLAlchemy / SQLAlchemy models.
Importer tous les modèles ici pour que create_all les détecte.
Import all models here so create_all can detect them.
"""

from rental_app.models.car import Car, CarStatus
from rental_app.models.client import Client
from rental_app.models.rental import ACTIVE_RENTAL_STATUSES, Rental, RentalStatus
from rental_app.models.expense import Expense
from rental_app.models.audit import AuditLog

__all__ = [
    "Car",
    "CarStatus",
    "Client",
    "Rental",
    "RentalStatus",
    "ACTIVE_RENTAL_STATUSES",
    "Expense",
    "AuditLog",
]
