"""
Service d'historique / Audit trail service.
Enregistre un instantane JSON de chaque enregistrement modifie.
Stores a JSON snapshot of every mutated record.
"""

import json
import logging
from typing import Awaitable, Callable

from rental_app.services.document_store import DocumentStore
from rental_app.utils.validation import now_iso

logger = logging.getLogger(__name__)

# Hook appele apres chaque mutation / Hook called after each mutation:
# (entity_type, action, snapshot)
ChangeHook = Callable[[str, str, dict], Awaitable[None]]


class AuditAction:
    CREATE = "CREATE"
    UPDATE = "UPDATE"
    STATUS = "STATUS"
    DELETE = "DELETE"


class AuditService:
    """Journal des modifications / Change journal."""

    def __init__(self, store: DocumentStore):
        self.store = store

    async def record(self, entity_type: str, action: str, snapshot: dict) -> int:
        """Enregistrer une modification / Record one change."""
        log_id = await self.store.insert_one("audit_logs", {
            "entity_type": entity_type,
            "entity_id": int(snapshot.get("id") or 0),
            "action": action,
            "snapshot": json.dumps(snapshot, default=str, ensure_ascii=False),
            "timestamp": now_iso(),
        })
        logger.debug("Audit %s %s:%s", action, entity_type, snapshot.get("id"))
        return log_id

    async def list_logs(
        self,
        entity_type: str | None = None,
        entity_id: int | None = None,
        action: str | None = None,
        limit: int = 100,
        offset: int = 0,
    ) -> tuple[int, list]:
        """Logs filtres, plus recents d'abord / Filtered logs, newest first."""
        filter: dict = {}
        if entity_type:
            filter["entity_type"] = entity_type
        if entity_id:
            filter["entity_id"] = entity_id
        if action:
            filter["action"] = action

        total = await self.store.count("audit_logs", filter)
        logs = await self.store.find("audit_logs", filter, sort=[("id", -1)], limit=limit, skip=offset)
        return total, logs
