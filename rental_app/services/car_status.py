"""
Synchronisation statut voiture / Car status synchronizer.

Le statut d'une voiture reflete la location active (reserved|rented) la plus
recente. Regles appliquees par RentalService :

    creation            -> reserved
    location reserved   -> reserved
    location rented     -> rented
    location returned   -> available
    suppression (active)-> available

A car's status mirrors its most recently created active rental. The manual
override (set_car_status) is an unconditional write: administrator
authority wins over automation, no check against active rentals.
"""

import logging

from rental_app.exceptions import ValidationError
from rental_app.models import ACTIVE_RENTAL_STATUSES, CarStatus, RentalStatus
from rental_app.schemas.car import CarRead, CarStats, CarWithCurrentRental, CurrentRental
from rental_app.services.audit_service import AuditAction, ChangeHook
from rental_app.services.document_store import DocumentStore

logger = logging.getLogger(__name__)


class CarStatusSynchronizer:
    """Maintient car.status coherent avec les locations / Keeps car.status consistent with rentals."""

    def __init__(self, store: DocumentStore, on_change: ChangeHook | None = None):
        self.store = store
        self.on_change = on_change

    @staticmethod
    def car_status_for(rental_status: str) -> CarStatus:
        """Statut voiture pour un statut de location / Car status for a rental status."""
        try:
            status = RentalStatus(rental_status)
        except ValueError:
            raise ValidationError(f"Invalid rental status: {rental_status}", field="status")
        if status == RentalStatus.RETURNED:
            return CarStatus.AVAILABLE
        return CarStatus(status.value)

    @staticmethod
    def pick_current_rental(rentals: list) -> object | None:
        """Location active la plus recente (created_at puis id) / Newest active rental (created_at, then id)."""
        active = [r for r in rentals if r.status in ACTIVE_RENTAL_STATUSES]
        if not active:
            return None
        return max(active, key=lambda r: (r.created_at, r.id))

    async def set_car_status(self, car_id: int, status: str) -> bool:
        """Ecrire le statut sans condition / Overwrite the car status unconditionally.

        Retourne False si la voiture n'existe pas / Returns False when the car does not exist.
        """
        try:
            target = CarStatus(status)
        except ValueError:
            raise ValidationError(f"Invalid car status: {status}", field="status")

        updated = await self.store.update_one("cars", {"id": car_id}, {"status": target.value})
        if not updated:
            logger.info("Car %s not found, status %s not applied", car_id, target.value)
            return False

        logger.info("Car %s status -> %s", car_id, target.value)
        if self.on_change:
            car = await self.store.find_one("cars", {"id": car_id})
            await self.on_change("car", AuditAction.STATUS, CarRead.model_validate(car).model_dump())
        return True

    async def apply_rental_status(self, car_id: int, rental_status: str) -> CarStatus:
        """Pousser le statut d'une location vers sa voiture / Push a rental status to its car."""
        car_status = self.car_status_for(rental_status)
        await self.set_car_status(car_id, car_status.value)
        return car_status

    async def release_car(self, car_id: int) -> None:
        """Liberer la voiture / Free the car back to available."""
        await self.set_car_status(car_id, CarStatus.AVAILABLE.value)

    async def cars_with_current_rental(self) -> list[CarWithCurrentRental]:
        """Voitures + location courante, plus recentes d'abord / Cars with current rental, newest first."""
        cars = await self.store.find("cars", sort=[("created_at", -1), ("id", -1)])
        active = await self.store.find("rentals", {"status": {"$in": ACTIVE_RENTAL_STATUSES}})

        by_car: dict[int, list] = {}
        for rental in active:
            by_car.setdefault(rental.car_id, []).append(rental)

        items = []
        for car in cars:
            item = CarWithCurrentRental.model_validate(car)
            current = self.pick_current_rental(by_car.get(car.id, []))
            if current is not None:
                item.current_rental = CurrentRental(
                    rental_id=current.id,
                    start_date=current.start_date,
                    return_date=current.return_date,
                    status=current.status,
                )
            items.append(item)
        return items

    async def car_stats(self) -> CarStats:
        """Compteurs par statut / Counts per status."""
        return CarStats(
            total=await self.store.count("cars"),
            available=await self.store.count("cars", {"status": CarStatus.AVAILABLE.value}),
            rented=await self.store.count("cars", {"status": CarStatus.RENTED.value}),
            reserved=await self.store.count("cars", {"status": CarStatus.RESERVED.value}),
        )
