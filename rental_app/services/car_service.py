"""
Service Voitures / Car service.
CRUD du parc. Le statut n'est modifie que par CarStatusSynchronizer.
"""

import logging

from rental_app.exceptions import NotFoundError
from rental_app.models import ACTIVE_RENTAL_STATUSES, CarStatus
from rental_app.schemas.car import CarRead
from rental_app.services.audit_service import AuditAction, ChangeHook
from rental_app.services.document_store import DocumentStore
from rental_app.utils.validation import now_iso, require_fields

logger = logging.getLogger(__name__)


class CarService:
    """CRUD voitures / Car CRUD."""

    def __init__(self, store: DocumentStore, on_change: ChangeHook | None = None):
        self.store = store
        self.on_change = on_change

    async def _notify(self, action: str, car) -> None:
        if self.on_change:
            await self.on_change("car", action, CarRead.model_validate(car).model_dump())

    async def get_car(self, car_id: int) -> CarRead:
        car = await self.store.find_one("cars", {"id": car_id})
        if car is None:
            raise NotFoundError("cars", car_id)
        return CarRead.model_validate(car)

    async def create_car(self, model: str | None, plate_number: str | None) -> CarRead:
        """Ajouter une voiture disponible / Add an available car."""
        require_fields(model=model, plate_number=plate_number)
        car_id = await self.store.insert_one("cars", {
            "model": model,
            "plate_number": plate_number,
            "status": CarStatus.AVAILABLE.value,
            "created_at": now_iso(),
        })
        logger.info("Car %s created (%s, %s)", car_id, model, plate_number)
        car = await self.store.find_one("cars", {"id": car_id})
        await self._notify(AuditAction.CREATE, car)
        return CarRead.model_validate(car)

    async def update_car(self, car_id: int, model: str | None, plate_number: str | None) -> CarRead:
        """Modifier modele et immatriculation / Update model and plate number."""
        require_fields(model=model, plate_number=plate_number)
        updated = await self.store.update_one("cars", {"id": car_id}, {"model": model, "plate_number": plate_number})
        if not updated:
            raise NotFoundError("cars", car_id)
        car = await self.store.find_one("cars", {"id": car_id})
        await self._notify(AuditAction.UPDATE, car)
        return CarRead.model_validate(car)

    async def delete_car(self, car_id: int) -> bool:
        """Supprimer une voiture, sans cascade / Delete a car, without cascade.

        Les locations et depenses qui la referencent deviennent orphelines.
        Rentals and expenses referencing it are left orphaned.
        """
        car = await self.store.find_one("cars", {"id": car_id})
        if car is None:
            return False
        snapshot = CarRead.model_validate(car).model_dump()

        active = await self.store.count("rentals", {"car_id": car_id, "status": {"$in": ACTIVE_RENTAL_STATUSES}})
        if active:
            logger.warning("Car %s deleted while referenced by %d active rental(s)", car_id, active)

        await self.store.delete_one("cars", {"id": car_id})
        logger.info("Car %s deleted", car_id)
        if self.on_change:
            await self.on_change("car", AuditAction.DELETE, snapshot)
        return True
