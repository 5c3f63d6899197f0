"""Team Routes — CRUD for /api/Team.

Invariants:
    - POST/PUT/DELETE require a bearer token
    - PUT merges the name only; an empty name is rejected
"""

import logging

from fastapi import APIRouter, Depends, Request, Response, status

from devhouse.api.routes.dependencies import service_for
from devhouse.api.security import require_bearer_token
from devhouse.schemas.common import MessageResponse
from devhouse.schemas.team import TeamCreate, TeamResponse, TeamUpdate
from devhouse.services.resource_service import ResourceService
from devhouse.services.resources import TEAMS

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/Team", tags=["teams"])
get_service = service_for(TEAMS)


@router.get("", response_model=list[TeamResponse])
async def list_teams(service: ResourceService = Depends(get_service)):
    """Retrieve all teams."""
    return await service.list_all()


@router.get("/{team_id}", response_model=TeamResponse, name="get_team")
async def get_team(team_id: int, service: ResourceService = Depends(get_service)):
    """Retrieve a team by id."""
    return await service.get(team_id)


@router.post(
    "", response_model=TeamResponse, status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_bearer_token)],
)
async def add_team(
    body: TeamCreate, request: Request, response: Response,
    service: ResourceService = Depends(get_service),
):
    """Create a team. Names must be unique."""
    team = await service.create(body.model_dump())
    response.headers["Location"] = str(request.url_for("get_team", team_id=team.id))
    return team


@router.put(
    "/{team_id}", response_model=MessageResponse,
    dependencies=[Depends(require_bearer_token)],
)
async def update_team(
    team_id: int, body: TeamUpdate,
    service: ResourceService = Depends(get_service),
):
    return MessageResponse(message=await service.update(team_id, body.model_dump()))


@router.delete(
    "/{team_id}", status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_bearer_token)],
)
async def delete_team(team_id: int, service: ResourceService = Depends(get_service)):
    """Delete a team. Refused while developers or projects still reference it."""
    await service.delete(team_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
