"""ProjectType Schemas — create body and the id-carrying full-replace body."""

from pydantic import Field

from devhouse.schemas.common import ApiModel


class ProjectTypeCreate(ApiModel):
    name: str | None = Field(None, max_length=200, examples=["Web Development"])


class ProjectTypeReplace(ApiModel):
    """Full replacement; id must equal the id in the path."""
    id: int
    name: str | None = Field(None, max_length=200, examples=["Updated Project Type"])


class ProjectTypeResponse(ApiModel):
    id: int
    name: str | None
