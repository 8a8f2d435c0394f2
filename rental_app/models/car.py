"""Modele Voiture / Car model.

Vehicule du parc de location. Le statut suit le cycle de vie des locations.
Rental fleet car. Its status follows the rental lifecycle.
"""

import enum

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from rental_app.database import Base


class CarStatus(str, enum.Enum):
    """Statut de disponibilite / Availability status."""
    AVAILABLE = "available"
    RENTED = "rented"
    RESERVED = "reserved"


class Car(Base):
    """Voiture du parc / Fleet car."""
    __tablename__ = "cars"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    model: Mapped[str] = mapped_column(String(120), nullable=False)
    # Cle d'affichage, non unique / Display key, not unique
    plate_number: Mapped[str] = mapped_column(String(30), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default=CarStatus.AVAILABLE.value)
    created_at: Mapped[str] = mapped_column(String(32), nullable=False)  # ISO 8601

    def __repr__(self) -> str:
        return f"<Car {self.plate_number} - {self.model} ({self.status})>"
