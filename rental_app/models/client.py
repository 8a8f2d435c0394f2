"""Modele Client / Client model."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from rental_app.database import Base


class Client(Base):
    """Client locataire / Renting client."""

    __tablename__ = "clients"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    full_name: Mapped[str] = mapped_column(String(150), nullable=False)
    passport_id: Mapped[str | None] = mapped_column(String(50))
    driving_license: Mapped[str | None] = mapped_column(String(50))
    # Noms de fichiers opaques geres a l'exterieur / Opaque filenames managed externally
    passport_image: Mapped[str | None] = mapped_column(String(255))
    license_image: Mapped[str | None] = mapped_column(String(255))
    created_at: Mapped[str] = mapped_column(String(32), nullable=False)  # ISO 8601

    def __repr__(self) -> str:
        return f"<Client {self.full_name}>"
