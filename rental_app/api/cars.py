"""Routes Voitures / Car API routes."""

from fastapi import APIRouter, Depends

from rental_app.exceptions import NotFoundError
from rental_app.schemas.car import CarCreate, CarRead, CarStats, CarStatusUpdate, CarUpdate, CarWithCurrentRental
from rental_app.services.car_service import CarService
from rental_app.services.car_status import CarStatusSynchronizer
from rental_app.api.deps import get_car_service, get_synchronizer

router = APIRouter()


@router.get("/", response_model=list[CarWithCurrentRental])
async def list_cars(synchronizer: CarStatusSynchronizer = Depends(get_synchronizer)):
    """Lister les voitures + location courante / List cars with their current rental."""
    return await synchronizer.cars_with_current_rental()


@router.get("/stats", response_model=CarStats)
async def car_stats(synchronizer: CarStatusSynchronizer = Depends(get_synchronizer)):
    """Compteurs par statut / Counts per status."""
    return await synchronizer.car_stats()


@router.get("/{car_id}", response_model=CarRead)
async def get_car(car_id: int, service: CarService = Depends(get_car_service)):
    """Voir une voiture / Get car detail."""
    return await service.get_car(car_id)


@router.post("/", response_model=CarRead, status_code=201)
async def create_car(data: CarCreate, service: CarService = Depends(get_car_service)):
    """Creer une voiture / Create car."""
    return await service.create_car(data.model, data.plate_number)


@router.put("/{car_id}", response_model=CarRead)
async def update_car(car_id: int, data: CarUpdate, service: CarService = Depends(get_car_service)):
    """Modifier une voiture / Update car."""
    return await service.update_car(car_id, data.model, data.plate_number)


@router.put("/{car_id}/status", response_model=CarRead)
async def override_car_status(
    car_id: int,
    data: CarStatusUpdate,
    synchronizer: CarStatusSynchronizer = Depends(get_synchronizer),
    service: CarService = Depends(get_car_service),
):
    """Forcer le statut (administrateur) / Manual status override (administrator)."""
    if not await synchronizer.set_car_status(car_id, data.status):
        raise NotFoundError("cars", car_id)
    return await service.get_car(car_id)


@router.delete("/{car_id}", status_code=204)
async def delete_car(car_id: int, service: CarService = Depends(get_car_service)):
    """Supprimer une voiture / Delete car."""
    if not await service.delete_car(car_id):
        raise NotFoundError("cars", car_id)
