"""Schémas Location / Rental schemas."""

from pydantic import BaseModel, ConfigDict

from rental_app.schemas.car import CarRead
from rental_app.schemas.client import ClientRead


class RentalCreate(BaseModel):
    # Champs optionnels : la validation est faite par RentalService
    # Optional fields: validation is done by RentalService
    car_id: int | None = None
    client_id: int | None = None
    start_date: str | None = None
    return_date: str | None = None
    rental_price: float | str | None = None


class RentalUpdate(RentalCreate):
    pass


class RentalStatusUpdate(BaseModel):
    status: str


class RentalRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    car_id: int
    client_id: int
    start_date: str
    return_date: str
    rental_price: float
    status: str
    created_at: str


class RentalWithJoinedNames(RentalRead):
    """Location jointe voiture + client / Rental joined with car and client."""
    car_model: str
    plate_number: str
    client_name: str


class RentalFormOptions(BaseModel):
    available_cars: list[CarRead]
    clients: list[ClientRead]
