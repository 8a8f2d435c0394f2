"""
Gestion du cycle de vie des locations / Rental lifecycle manager.

Seul ecrivain des locations et seul declencheur automatique des changements
de statut voiture. Etats : reserved -> rented -> returned, suppression
possible depuis n'importe quel etat.

Only writer of rental records and only automated trigger of car status
changes. Each operation is a read-then-write sequence without a
transaction around it: a concurrent writer between the read and the write
of update_rental_status / delete_rental can leave car and rental statuses
out of step (lost update). Usage is single-operator, so this race is
accepted rather than solved.

Identifiant inconnu sur update/delete : no-op silencieux (idempotent).
Unknown id on update/delete: silent no-op (idempotent).
"""

import logging

from sqlalchemy import select

from rental_app.exceptions import NotFoundError, ValidationError
from rental_app.models import Car, CarStatus, Client, Rental, RentalStatus
from rental_app.schemas.car import CarRead
from rental_app.schemas.client import ClientRead
from rental_app.schemas.rental import RentalFormOptions, RentalRead, RentalWithJoinedNames
from rental_app.services.audit_service import AuditAction, ChangeHook
from rental_app.services.car_status import CarStatusSynchronizer
from rental_app.services.document_store import DocumentStore, store_errors
from rental_app.utils.validation import now_iso, parse_amount, parse_iso_date, require_fields

logger = logging.getLogger(__name__)


class RentalService:
    """Cycle de vie des locations / Rental lifecycle."""

    def __init__(
        self,
        store: DocumentStore,
        synchronizer: CarStatusSynchronizer | None = None,
        on_change: ChangeHook | None = None,
        enforce_availability: bool = False,
    ):
        self.store = store
        self.synchronizer = synchronizer or CarStatusSynchronizer(store, on_change=on_change)
        self.on_change = on_change
        self.enforce_availability = enforce_availability

    # --- Helpers ---

    @staticmethod
    def _validate_fields(car_id, client_id, start_date, return_date) -> None:
        require_fields(car_id=car_id, client_id=client_id, start_date=start_date, return_date=return_date)
        parse_iso_date(start_date, "start_date")
        parse_iso_date(return_date, "return_date")

    @staticmethod
    def _parse_status(status: str | None) -> RentalStatus:
        require_fields(status=status)
        try:
            return RentalStatus(status)
        except ValueError:
            raise ValidationError(f"Invalid rental status: {status}", field="status")

    async def _notify(self, action: str, rental) -> None:
        if self.on_change:
            await self.on_change("rental", action, RentalRead.model_validate(rental).model_dump())

    async def _check_car_available(self, car_id: int) -> None:
        car = await self.store.find_one("cars", {"id": car_id})
        if car is None:
            raise ValidationError(f"Car {car_id} does not exist", field="car_id")
        if car.status != CarStatus.AVAILABLE.value:
            raise ValidationError(f"Car {car_id} is not available ({car.status})", field="car_id")

    # --- Lecture / Read ---

    async def get_rental(self, rental_id: int) -> RentalRead:
        rental = await self.store.find_one("rentals", {"id": rental_id})
        if rental is None:
            raise NotFoundError("rentals", rental_id)
        return RentalRead.model_validate(rental)

    async def list_rentals(self, status: str | None = None) -> list[RentalWithJoinedNames]:
        """Locations jointes voiture + client, plus recentes d'abord.

        Rentals joined with car and client, newest first. Rentals whose car or
        client no longer exists are left out (inner join).
        """
        query = (
            select(Rental, Car.model, Car.plate_number, Client.full_name)
            .join(Car, Car.id == Rental.car_id)
            .join(Client, Client.id == Rental.client_id)
            .order_by(Rental.created_at.desc(), Rental.id.desc())
        )
        if status is not None:
            query = query.where(Rental.status == self._parse_status(status).value)
        with store_errors("aggregate", "rentals"):
            result = await self.store.session.execute(query)
            rows = result.all()
        return [
            RentalWithJoinedNames(
                **RentalRead.model_validate(rental).model_dump(),
                car_model=car_model,
                plate_number=plate_number,
                client_name=client_name,
            )
            for rental, car_model, plate_number, client_name in rows
        ]

    async def form_options(self) -> RentalFormOptions:
        """Voitures disponibles + clients pour le formulaire / Available cars and clients for the form."""
        cars = await self.store.find(
            "cars", {"status": CarStatus.AVAILABLE.value}, sort=[("created_at", -1), ("id", -1)]
        )
        clients = await self.store.find("clients", sort=[("created_at", -1), ("id", -1)])
        return RentalFormOptions(
            available_cars=[CarRead.model_validate(c) for c in cars],
            clients=[ClientRead.model_validate(c) for c in clients],
        )

    # --- Cycle de vie / Lifecycle ---

    async def create_rental(
        self,
        car_id: int | None,
        client_id: int | None,
        start_date: str | None,
        return_date: str | None,
        rental_price=None,
    ) -> RentalRead:
        """Creer une location reservee et reserver la voiture / Create a reserved rental and reserve its car."""
        self._validate_fields(car_id, client_id, start_date, return_date)
        price = parse_amount(rental_price, "rental_price")

        if self.enforce_availability:
            await self._check_car_available(car_id)

        rental_id = await self.store.insert_one("rentals", {
            "car_id": car_id,
            "client_id": client_id,
            "start_date": start_date,
            "return_date": return_date,
            "rental_price": price,
            "status": RentalStatus.RESERVED.value,
            "created_at": now_iso(),
        })
        await self.synchronizer.set_car_status(car_id, CarStatus.RESERVED.value)
        logger.info("Rental %s created: car %s reserved for client %s (%s -> %s)",
                    rental_id, car_id, client_id, start_date, return_date)

        rental = await self.store.find_one("rentals", {"id": rental_id})
        await self._notify(AuditAction.CREATE, rental)
        return RentalRead.model_validate(rental)

    async def update_rental_status(self, rental_id: int, new_status: str) -> RentalRead | None:
        """Changer le statut et pousser le statut voiture / Set status and push the paired car status.

        Retourne None si la location n'existe pas / Returns None when the rental does not exist.
        """
        status = self._parse_status(new_status)
        rental = await self.store.find_one("rentals", {"id": rental_id})
        if rental is None:
            logger.info("Rental %s not found, status update to %s ignored", rental_id, status.value)
            return None

        await self.store.update_one("rentals", {"id": rental_id}, {"status": status.value})
        car_status = await self.synchronizer.apply_rental_status(rental.car_id, status.value)
        logger.info("Rental %s -> %s, car %s -> %s", rental_id, status.value, rental.car_id, car_status.value)

        await self._notify(AuditAction.STATUS, rental)
        return RentalRead.model_validate(rental)

    async def update_rental_details(
        self,
        rental_id: int,
        car_id: int | None,
        client_id: int | None,
        start_date: str | None,
        return_date: str | None,
        rental_price=None,
    ) -> RentalRead | None:
        """Remplacer les champs de la location sans toucher aux statuts.

        Full replacement of the rental fields. Neither the rental status nor
        any car status is changed. Returns None when the rental does not exist.
        """
        self._validate_fields(car_id, client_id, start_date, return_date)
        price = parse_amount(rental_price, "rental_price")

        updated = await self.store.update_one("rentals", {"id": rental_id}, {
            "car_id": car_id,
            "client_id": client_id,
            "start_date": start_date,
            "return_date": return_date,
            "rental_price": price,
        })
        if not updated:
            logger.info("Rental %s not found, details update ignored", rental_id)
            return None

        rental = await self.store.find_one("rentals", {"id": rental_id})
        await self._notify(AuditAction.UPDATE, rental)
        return RentalRead.model_validate(rental)

    async def delete_rental(self, rental_id: int) -> bool:
        """Supprimer une location ; liberer la voiture si non rendue.

        Delete a rental; a non-returned rental frees its car first. Returns
        whether a rental was deleted.
        """
        rental = await self.store.find_one("rentals", {"id": rental_id})
        snapshot = RentalRead.model_validate(rental).model_dump() if rental is not None else None
        if rental is not None and rental.status != RentalStatus.RETURNED.value:
            await self.synchronizer.release_car(rental.car_id)

        deleted = await self.store.delete_one("rentals", {"id": rental_id})
        if deleted:
            logger.info("Rental %s deleted", rental_id)
            if self.on_change:
                await self.on_change("rental", AuditAction.DELETE, snapshot)
        else:
            logger.info("Rental %s not found, delete ignored", rental_id)
        return deleted
