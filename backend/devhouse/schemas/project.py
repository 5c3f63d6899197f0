"""Project Schemas."""

from pydantic import Field

from devhouse.schemas.common import ApiModel


class ProjectCreate(ApiModel):
    name: str | None = Field(None, max_length=200, examples=["Website Redesign"])
    project_type_id: int = Field(0, examples=[2])
    team_id: int = Field(0, examples=[1])


class ProjectUpdate(ApiModel):
    name: str | None = Field(None, max_length=200)
    project_type_id: int = 0
    team_id: int = 0


class ProjectResponse(ApiModel):
    id: int
    name: str | None
    project_type_id: int
    team_id: int
