"""Routes Clients / Client API routes."""

from fastapi import APIRouter, Depends

from rental_app.exceptions import NotFoundError
from rental_app.schemas.client import ClientCreate, ClientDocumentsUpdate, ClientRead, ClientUpdate
from rental_app.services.client_service import ClientService
from rental_app.api.deps import get_client_service

router = APIRouter()


@router.get("/", response_model=list[ClientRead])
async def list_clients(service: ClientService = Depends(get_client_service)):
    return await service.list_clients()


@router.get("/{client_id}", response_model=ClientRead)
async def get_client(client_id: int, service: ClientService = Depends(get_client_service)):
    return await service.get_client(client_id)


@router.post("/", response_model=ClientRead, status_code=201)
async def create_client(data: ClientCreate, service: ClientService = Depends(get_client_service)):
    """Creer un client / Create client."""
    return await service.create_client(**data.model_dump())


@router.put("/{client_id}", response_model=ClientRead)
async def update_client(client_id: int, data: ClientUpdate, service: ClientService = Depends(get_client_service)):
    return await service.update_client(client_id, **data.model_dump())


@router.put("/{client_id}/documents", response_model=ClientRead)
async def update_client_documents(
    client_id: int,
    data: ClientDocumentsUpdate,
    service: ClientService = Depends(get_client_service),
):
    """Definir/effacer les references d'images / Set or clear image references.

    Seuls les champs envoyes sont modifies / Only the fields sent are changed.
    """
    return await service.set_client_documents(client_id, **data.model_dump(exclude_unset=True))


@router.delete("/{client_id}", status_code=204)
async def delete_client(client_id: int, service: ClientService = Depends(get_client_service)):
    if not await service.delete_client(client_id):
        raise NotFoundError("clients", client_id)
