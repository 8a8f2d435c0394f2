"""Schémas Voiture / Car schemas."""

from pydantic import BaseModel, ConfigDict


class CarCreate(BaseModel):
    model: str | None = None
    plate_number: str | None = None


class CarUpdate(BaseModel):
    model: str | None = None
    plate_number: str | None = None


class CarStatusUpdate(BaseModel):
    status: str


class CarRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    model: str
    plate_number: str
    status: str
    created_at: str


class CurrentRental(BaseModel):
    """Location active la plus recente / Most recent active rental."""
    rental_id: int
    start_date: str
    return_date: str
    status: str


class CarWithCurrentRental(CarRead):
    current_rental: CurrentRental | None = None


class CarStats(BaseModel):
    total: int = 0
    available: int = 0
    rented: int = 0
    reserved: int = 0
