"""
Dépendances des routes / Route dependencies.
Construit les services sur la session de la requête, injectés via Depends().
Builds the services on the request session, injected via Depends().

L'authentification est assurée en amont / Authentication is handled upstream.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from rental_app.config import settings
from rental_app.database import get_db
from rental_app.services.audit_service import AuditService, ChangeHook
from rental_app.services.car_service import CarService
from rental_app.services.car_status import CarStatusSynchronizer
from rental_app.services.client_service import ClientService
from rental_app.services.document_store import DocumentStore
from rental_app.services.expense_service import ExpenseService
from rental_app.services.finance_service import FinanceService
from rental_app.services.notification_service import NotificationService
from rental_app.services.rental_service import RentalService


async def get_store(db: AsyncSession = Depends(get_db)) -> DocumentStore:
    """Store de la requête / Per-request document store."""
    return DocumentStore(db)


async def get_audit_service(store: DocumentStore = Depends(get_store)) -> AuditService:
    return AuditService(store)


async def get_change_hook(audit: AuditService = Depends(get_audit_service)) -> ChangeHook:
    """Hook de modification -> journal d'audit / Change hook -> audit log."""
    return audit.record


async def get_synchronizer(
    store: DocumentStore = Depends(get_store),
    hook: ChangeHook = Depends(get_change_hook),
) -> CarStatusSynchronizer:
    return CarStatusSynchronizer(store, on_change=hook)


async def get_car_service(
    store: DocumentStore = Depends(get_store),
    hook: ChangeHook = Depends(get_change_hook),
) -> CarService:
    return CarService(store, on_change=hook)


async def get_client_service(
    store: DocumentStore = Depends(get_store),
    hook: ChangeHook = Depends(get_change_hook),
) -> ClientService:
    return ClientService(store, on_change=hook)


async def get_rental_service(
    store: DocumentStore = Depends(get_store),
    synchronizer: CarStatusSynchronizer = Depends(get_synchronizer),
    hook: ChangeHook = Depends(get_change_hook),
) -> RentalService:
    return RentalService(
        store,
        synchronizer=synchronizer,
        on_change=hook,
        enforce_availability=settings.ENFORCE_CAR_AVAILABILITY,
    )


async def get_expense_service(
    store: DocumentStore = Depends(get_store),
    hook: ChangeHook = Depends(get_change_hook),
) -> ExpenseService:
    return ExpenseService(store, on_change=hook)


async def get_finance_service(store: DocumentStore = Depends(get_store)) -> FinanceService:
    return FinanceService(store)


async def get_notification_service(
    rentals: RentalService = Depends(get_rental_service),
) -> NotificationService:
    return NotificationService(rentals)
