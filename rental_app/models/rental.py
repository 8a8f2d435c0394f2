"""Modele Location / Rental model."""

import enum

from sqlalchemy import Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from rental_app.database import Base


class RentalStatus(str, enum.Enum):
    """Statut de location / Rental status (reserved -> rented -> returned)."""
    RESERVED = "reserved"
    RENTED = "rented"
    RETURNED = "returned"


# Locations qui occupent encore la voiture / Rentals still holding the car
ACTIVE_RENTAL_STATUSES = (RentalStatus.RESERVED.value, RentalStatus.RENTED.value)


class Rental(Base):
    """Contrat de location / Rental agreement."""
    __tablename__ = "rentals"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    # Pas de contrainte FK : references orphelines possibles / No FK constraint: orphan references allowed
    car_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    client_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    start_date: Mapped[str] = mapped_column(String(10), nullable=False)  # YYYY-MM-DD
    return_date: Mapped[str] = mapped_column(String(10), nullable=False)  # YYYY-MM-DD
    rental_price: Mapped[float] = mapped_column(Numeric(12, 2), nullable=False, default=0)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default=RentalStatus.RESERVED.value)
    created_at: Mapped[str] = mapped_column(String(32), nullable=False)  # ISO 8601

    def __repr__(self) -> str:
        return f"<Rental {self.id} car={self.car_id} client={self.client_id} {self.status}>"
