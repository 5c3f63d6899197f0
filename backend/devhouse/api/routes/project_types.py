"""ProjectType Routes — CRUD for /api/ProjectType with full-replace updates.

Invariants:
    - PUT replaces the whole row and answers 204; body id must equal path id
    - PUT is served on both /{id} and /updateprojecttype/{id}
    - A replace that hits a vanished row answers 404; any other conflict 409
"""

import logging

from fastapi import APIRouter, Depends, Request, Response, status

from devhouse.api.routes.dependencies import service_for
from devhouse.api.security import require_bearer_token
from devhouse.schemas.project_type import (
    ProjectTypeCreate, ProjectTypeReplace, ProjectTypeResponse,
)
from devhouse.services.resource_service import ResourceService
from devhouse.services.resources import PROJECT_TYPES

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/ProjectType", tags=["project-types"])
get_service = service_for(PROJECT_TYPES)


@router.get("", response_model=list[ProjectTypeResponse])
async def list_project_types(service: ResourceService = Depends(get_service)):
    return await service.list_all()


@router.get(
    "/{project_type_id}", response_model=ProjectTypeResponse,
    name="get_project_type",
)
async def get_project_type(
    project_type_id: int, service: ResourceService = Depends(get_service),
):
    return await service.get(project_type_id)


@router.post(
    "", response_model=ProjectTypeResponse, status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_bearer_token)],
)
async def add_project_type(
    body: ProjectTypeCreate, request: Request, response: Response,
    service: ResourceService = Depends(get_service),
):
    project_type = await service.create(body.model_dump())
    response.headers["Location"] = str(
        request.url_for("get_project_type", project_type_id=project_type.id),
    )
    return project_type


@router.put(
    "/{project_type_id}", status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_bearer_token)],
)
@router.put(
    "/updateprojecttype/{project_type_id}", status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_bearer_token)],
)
async def update_project_type(
    project_type_id: int, body: ProjectTypeReplace,
    service: ResourceService = Depends(get_service),
):
    """Replace a project type."""
    await service.replace(project_type_id, body.model_dump())
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{project_type_id}", status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_bearer_token)],
)
async def delete_project_type(
    project_type_id: int, service: ResourceService = Depends(get_service),
):
    await service.delete(project_type_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
