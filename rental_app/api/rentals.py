"""Routes Locations / Rental API routes.

Mise a jour / suppression d'une location inconnue : succes silencieux.
Updating or deleting an unknown rental succeeds silently.
"""

from fastapi import APIRouter, Depends, Request

from rental_app.config import settings
from rental_app.rate_limit import limiter
from rental_app.schemas.rental import (
    RentalCreate,
    RentalFormOptions,
    RentalRead,
    RentalStatusUpdate,
    RentalUpdate,
    RentalWithJoinedNames,
)
from rental_app.services.rental_service import RentalService
from rental_app.api.deps import get_rental_service

router = APIRouter()


@router.get("/", response_model=list[RentalWithJoinedNames])
async def list_rentals(status: str | None = None, service: RentalService = Depends(get_rental_service)):
    """Lister les locations / List rentals with car and client names."""
    return await service.list_rentals(status=status)


@router.get("/form-options", response_model=RentalFormOptions)
async def rental_form_options(service: RentalService = Depends(get_rental_service)):
    """Voitures disponibles et clients / Available cars and clients for a new rental."""
    return await service.form_options()


@router.get("/{rental_id}", response_model=RentalRead)
async def get_rental(rental_id: int, service: RentalService = Depends(get_rental_service)):
    return await service.get_rental(rental_id)


@router.post("/", response_model=RentalRead, status_code=201)
@limiter.limit(settings.RATE_LIMIT_WRITE)
async def create_rental(
    request: Request,
    data: RentalCreate,
    service: RentalService = Depends(get_rental_service),
):
    """Creer une location (voiture reservee) / Create rental (car becomes reserved)."""
    return await service.create_rental(
        data.car_id, data.client_id, data.start_date, data.return_date, data.rental_price
    )


@router.put("/{rental_id}")
async def update_rental(rental_id: int, data: RentalUpdate, service: RentalService = Depends(get_rental_service)):
    """Modifier les champs d'une location / Replace rental fields (statuses untouched)."""
    rental = await service.update_rental_details(
        rental_id, data.car_id, data.client_id, data.start_date, data.return_date, data.rental_price
    )
    return {"success": True, "rental": rental}


@router.put("/{rental_id}/status")
async def update_rental_status(
    rental_id: int,
    data: RentalStatusUpdate,
    service: RentalService = Depends(get_rental_service),
):
    """Changer le statut (synchronise la voiture) / Change status (car status follows)."""
    rental = await service.update_rental_status(rental_id, data.status)
    return {"success": True, "rental": rental}


@router.delete("/{rental_id}", status_code=204)
async def delete_rental(rental_id: int, service: RentalService = Depends(get_rental_service)):
    """Supprimer une location / Delete rental (frees the car if not returned)."""
    await service.delete_rental(rental_id)
