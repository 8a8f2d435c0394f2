"""Schémas Client / Client schemas."""

from pydantic import BaseModel, ConfigDict


class ClientCreate(BaseModel):
    full_name: str | None = None
    passport_id: str | None = None
    driving_license: str | None = None
    passport_image: str | None = None
    license_image: str | None = None


class ClientUpdate(BaseModel):
    full_name: str | None = None
    passport_id: str | None = None
    driving_license: str | None = None


class ClientDocumentsUpdate(BaseModel):
    """Chaine vide ou null = effacer / Empty string or null clears the reference."""
    passport_image: str | None = None
    license_image: str | None = None


class ClientRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    full_name: str
    passport_id: str | None = None
    driving_license: str | None = None
    passport_image: str | None = None
    license_image: str | None = None
    created_at: str
