from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Path, status

from scheduling_api.core.deps import RequestContext, get_client_service, get_request_context
from scheduling_api.schemas.clients import ClientCreate, ClientRead
from scheduling_api.schemas.common import ErrorResponse, SuccessResponse
from scheduling_api.services.clients import ClientService

router = APIRouter(
    prefix="/clients",
    tags=["Clients"],
    responses={
        401: {"model": ErrorResponse, "description": "Missing or invalid authentication context"},
        403: {"model": ErrorResponse, "description": "Role not allowed"},
    },
)


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=List[ClientRead],
    summary="List clients",
    description="List the tenant's clients ordered by name. Roles: owner, admin, staff.",
)
async def list_clients(
    ctx: RequestContext = Depends(get_request_context),
    service: ClientService = Depends(get_client_service),
) -> List[ClientRead]:
    clients = await service.list_clients(ctx.tenant_id, ctx.role)
    return [ClientRead.model_validate(x) for x in clients]


# PUBLIC_INTERFACE
@router.get(
    "/{client_id}",
    response_model=ClientRead,
    summary="Get client",
    responses={404: {"model": ErrorResponse}},
)
async def get_client(
    client_id: int = Path(...),
    ctx: RequestContext = Depends(get_request_context),
    service: ClientService = Depends(get_client_service),
) -> ClientRead:
    client = await service.get_client(ctx.tenant_id, ctx.role, client_id)
    return ClientRead.model_validate(client)


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=ClientRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create client",
    description="Create a client for the tenant. Roles: owner, admin.",
    responses={400: {"model": ErrorResponse}},
)
async def create_client(
    payload: ClientCreate,
    ctx: RequestContext = Depends(get_request_context),
    service: ClientService = Depends(get_client_service),
) -> ClientRead:
    created = await service.create_client(ctx.tenant_id, ctx.role, payload)
    return ClientRead.model_validate(created)


# PUBLIC_INTERFACE
@router.put(
    "/{client_id}",
    response_model=ClientRead,
    summary="Replace client",
    description="Replace all fields of a tenant client. Roles: owner, admin.",
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_client(
    payload: ClientCreate,
    client_id: int = Path(...),
    ctx: RequestContext = Depends(get_request_context),
    service: ClientService = Depends(get_client_service),
) -> ClientRead:
    updated = await service.update_client(ctx.tenant_id, ctx.role, client_id, payload)
    return ClientRead.model_validate(updated)


# PUBLIC_INTERFACE
@router.delete(
    "/{client_id}",
    response_model=SuccessResponse,
    summary="Delete client",
    description="Permanently delete a tenant client. Role: owner.",
    responses={404: {"model": ErrorResponse}},
)
async def delete_client(
    client_id: int = Path(...),
    ctx: RequestContext = Depends(get_request_context),
    service: ClientService = Depends(get_client_service),
) -> SuccessResponse:
    await service.delete_client(ctx.tenant_id, ctx.role, client_id)
    return SuccessResponse(success=True)
