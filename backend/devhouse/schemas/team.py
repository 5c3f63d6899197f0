"""Team Schemas."""

from pydantic import Field

from devhouse.schemas.common import ApiModel


class TeamCreate(ApiModel):
    name: str | None = Field(None, max_length=200, examples=["Development Team"])


class TeamUpdate(ApiModel):
    name: str | None = Field(None, max_length=200, examples=["Updated Development Team"])


class TeamResponse(ApiModel):
    id: int
    name: str | None
