"""Role Routes — CRUD for /api/Role."""

import logging

from fastapi import APIRouter, Depends, Request, Response, status

from devhouse.api.routes.dependencies import service_for
from devhouse.api.security import require_bearer_token
from devhouse.schemas.common import MessageResponse
from devhouse.schemas.role import RoleCreate, RoleResponse, RoleUpdate
from devhouse.services.resource_service import ResourceService
from devhouse.services.resources import ROLES

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/Role", tags=["roles"])
get_service = service_for(ROLES)


@router.get("", response_model=list[RoleResponse])
async def list_roles(service: ResourceService = Depends(get_service)):
    return await service.list_all()


@router.get("/{role_id}", response_model=RoleResponse, name="get_role")
async def get_role(role_id: int, service: ResourceService = Depends(get_service)):
    return await service.get(role_id)


@router.post(
    "", response_model=RoleResponse, status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_bearer_token)],
)
async def add_role(
    body: RoleCreate, request: Request, response: Response,
    service: ResourceService = Depends(get_service),
):
    """Create a role. Name is required and unique."""
    role = await service.create(body.model_dump())
    response.headers["Location"] = str(request.url_for("get_role", role_id=role.id))
    return role


@router.put(
    "/{role_id}", response_model=MessageResponse,
    dependencies=[Depends(require_bearer_token)],
)
async def update_role(
    role_id: int, body: RoleUpdate,
    service: ResourceService = Depends(get_service),
):
    return MessageResponse(message=await service.update(role_id, body.model_dump()))


@router.delete(
    "/{role_id}", status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_bearer_token)],
)
async def delete_role(role_id: int, service: ResourceService = Depends(get_service)):
    await service.delete(role_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
