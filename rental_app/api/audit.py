"""Routes Historique / Audit log API routes."""

from fastapi import APIRouter, Depends, Query

from rental_app.schemas.audit import AuditLogPage, AuditLogRead
from rental_app.services.audit_service import AuditService
from rental_app.api.deps import get_audit_service

router = APIRouter()


@router.get("/", response_model=AuditLogPage)
async def list_audit_logs(
    entity_type: str | None = Query(default=None),
    entity_id: int | None = Query(default=None),
    action: str | None = Query(default=None),
    limit: int = Query(default=100, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
    audit: AuditService = Depends(get_audit_service),
):
    """Lister les logs d'audit / List audit logs."""
    total, logs = await audit.list_logs(entity_type, entity_id, action, limit=limit, offset=offset)
    return AuditLogPage(total=total, items=[AuditLogRead.model_validate(log) for log in logs])
