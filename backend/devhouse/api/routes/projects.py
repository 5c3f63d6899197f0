"""Project Routes — CRUD for /api/Project.

Invariants:
    - POST checks teamId then projectTypeId exist and attaches both rows before insert
    - PUT merges name and always overwrites teamId/projectTypeId
"""

import logging

from fastapi import APIRouter, Depends, Request, Response, status

from devhouse.api.routes.dependencies import service_for
from devhouse.api.security import require_bearer_token
from devhouse.schemas.common import MessageResponse
from devhouse.schemas.project import ProjectCreate, ProjectResponse, ProjectUpdate
from devhouse.services.resource_service import ResourceService
from devhouse.services.resources import PROJECTS

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/Project", tags=["projects"])
get_service = service_for(PROJECTS)


@router.get("", response_model=list[ProjectResponse])
async def list_projects(service: ResourceService = Depends(get_service)):
    return await service.list_all()


@router.get("/{project_id}", response_model=ProjectResponse, name="get_project")
async def get_project(
    project_id: int, service: ResourceService = Depends(get_service),
):
    return await service.get(project_id)


@router.post(
    "", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_bearer_token)],
)
async def add_project(
    body: ProjectCreate, request: Request, response: Response,
    service: ResourceService = Depends(get_service),
):
    project = await service.create(body.model_dump())
    response.headers["Location"] = str(
        request.url_for("get_project", project_id=project.id),
    )
    return project


@router.put(
    "/{project_id}", response_model=MessageResponse,
    dependencies=[Depends(require_bearer_token)],
)
async def update_project(
    project_id: int, body: ProjectUpdate,
    service: ResourceService = Depends(get_service),
):
    return MessageResponse(
        message=await service.update(project_id, body.model_dump()),
    )


@router.delete(
    "/{project_id}", status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_bearer_token)],
)
async def delete_project(
    project_id: int, service: ResourceService = Depends(get_service),
):
    await service.delete(project_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
