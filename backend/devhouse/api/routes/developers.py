"""Developer Routes — CRUD for /api/Developer.

Invariants:
    - POST checks teamId then roleId exist; first missing one is reported
    - PUT merges firstname/lastname and always overwrites teamId/roleId
"""

import logging

from fastapi import APIRouter, Depends, Request, Response, status

from devhouse.api.routes.dependencies import service_for
from devhouse.api.security import require_bearer_token
from devhouse.schemas.common import MessageResponse
from devhouse.schemas.developer import (
    DeveloperCreate, DeveloperResponse, DeveloperUpdate,
)
from devhouse.services.resource_service import ResourceService
from devhouse.services.resources import DEVELOPERS

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/Developer", tags=["developers"])
get_service = service_for(DEVELOPERS)


@router.get("", response_model=list[DeveloperResponse])
async def list_developers(service: ResourceService = Depends(get_service)):
    return await service.list_all()


@router.get("/{developer_id}", response_model=DeveloperResponse, name="get_developer")
async def get_developer(
    developer_id: int, service: ResourceService = Depends(get_service),
):
    return await service.get(developer_id)


@router.post(
    "", response_model=DeveloperResponse, status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_bearer_token)],
)
async def add_developer(
    body: DeveloperCreate, request: Request, response: Response,
    service: ResourceService = Depends(get_service),
):
    developer = await service.create(body.model_dump())
    response.headers["Location"] = str(
        request.url_for("get_developer", developer_id=developer.id),
    )
    return developer


@router.put(
    "/{developer_id}", response_model=MessageResponse,
    dependencies=[Depends(require_bearer_token)],
)
async def update_developer(
    developer_id: int, body: DeveloperUpdate,
    service: ResourceService = Depends(get_service),
):
    return MessageResponse(
        message=await service.update(developer_id, body.model_dump()),
    )


@router.delete(
    "/{developer_id}", status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_bearer_token)],
)
async def delete_developer(
    developer_id: int, service: ResourceService = Depends(get_service),
):
    await service.delete(developer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
