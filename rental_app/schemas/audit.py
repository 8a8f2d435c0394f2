"""Schémas Historique / Audit log schemas."""

from pydantic import BaseModel, ConfigDict


class AuditLogRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    entity_type: str
    entity_id: int
    action: str
    snapshot: str | None = None
    timestamp: str


class AuditLogPage(BaseModel):
    total: int
    items: list[AuditLogRead]
