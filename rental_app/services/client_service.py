"""
Service Clients / Client service.
Les images de documents sont des references opaques : jamais lues ici.
Document images are opaque references: never opened here.
"""

import logging

from rental_app.exceptions import NotFoundError
from rental_app.schemas.client import ClientRead
from rental_app.services.audit_service import AuditAction, ChangeHook
from rental_app.services.document_store import DocumentStore
from rental_app.utils.validation import now_iso, require_fields

logger = logging.getLogger(__name__)

_UNSET = object()


class ClientService:
    """CRUD clients / Client CRUD."""

    def __init__(self, store: DocumentStore, on_change: ChangeHook | None = None):
        self.store = store
        self.on_change = on_change

    async def _notify(self, action: str, client) -> None:
        if self.on_change:
            await self.on_change("client", action, ClientRead.model_validate(client).model_dump())

    async def list_clients(self) -> list[ClientRead]:
        clients = await self.store.find("clients", sort=[("created_at", -1), ("id", -1)])
        return [ClientRead.model_validate(c) for c in clients]

    async def get_client(self, client_id: int) -> ClientRead:
        client = await self.store.find_one("clients", {"id": client_id})
        if client is None:
            raise NotFoundError("clients", client_id)
        return ClientRead.model_validate(client)

    async def create_client(
        self,
        full_name: str | None,
        passport_id: str | None = None,
        driving_license: str | None = None,
        passport_image: str | None = None,
        license_image: str | None = None,
    ) -> ClientRead:
        require_fields(full_name=full_name)
        client_id = await self.store.insert_one("clients", {
            "full_name": full_name,
            "passport_id": passport_id or "",
            "driving_license": driving_license or "",
            "passport_image": passport_image or None,
            "license_image": license_image or None,
            "created_at": now_iso(),
        })
        logger.info("Client %s created (%s)", client_id, full_name)
        client = await self.store.find_one("clients", {"id": client_id})
        await self._notify(AuditAction.CREATE, client)
        return ClientRead.model_validate(client)

    async def update_client(
        self,
        client_id: int,
        full_name: str | None,
        passport_id: str | None = None,
        driving_license: str | None = None,
    ) -> ClientRead:
        require_fields(full_name=full_name)
        updated = await self.store.update_one("clients", {"id": client_id}, {
            "full_name": full_name,
            "passport_id": passport_id or "",
            "driving_license": driving_license or "",
        })
        if not updated:
            raise NotFoundError("clients", client_id)
        client = await self.store.find_one("clients", {"id": client_id})
        await self._notify(AuditAction.UPDATE, client)
        return ClientRead.model_validate(client)

    async def set_client_documents(
        self,
        client_id: int,
        passport_image=_UNSET,
        license_image=_UNSET,
    ) -> ClientRead:
        """Definir ou effacer les references d'images / Set or clear the image references.

        Un argument omis laisse la reference inchangee ; None ou "" l'efface.
        An omitted argument leaves the reference untouched; None or "" clears it.
        """
        patch = {}
        if passport_image is not _UNSET:
            patch["passport_image"] = passport_image or None
        if license_image is not _UNSET:
            patch["license_image"] = license_image or None

        client = await self.store.find_one("clients", {"id": client_id})
        if client is None:
            raise NotFoundError("clients", client_id)
        if patch:
            await self.store.update_one("clients", {"id": client_id}, patch)
            await self._notify(AuditAction.UPDATE, client)
        return ClientRead.model_validate(client)

    async def delete_client(self, client_id: int) -> bool:
        client = await self.store.find_one("clients", {"id": client_id})
        if client is None:
            return False
        snapshot = ClientRead.model_validate(client).model_dump()
        await self.store.delete_one("clients", {"id": client_id})
        logger.info("Client %s deleted", client_id)
        if self.on_change:
            await self.on_change("client", AuditAction.DELETE, snapshot)
        return True
