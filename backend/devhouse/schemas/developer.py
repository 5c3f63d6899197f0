"""Developer Schemas.

Invariants:
    - DeveloperUpdate foreign keys default to 0: an omitted teamId/roleId is
      written as 0 by the merge (see core/merge.py)
"""

from pydantic import Field

from devhouse.schemas.common import ApiModel


class DeveloperCreate(ApiModel):
    firstname: str | None = Field(None, max_length=100, examples=["John"])
    lastname: str | None = Field(None, max_length=100, examples=["Doe"])
    team_id: int = Field(0, examples=[1])
    role_id: int = Field(0, examples=[1])


class DeveloperUpdate(ApiModel):
    firstname: str | None = Field(None, max_length=100)
    lastname: str | None = Field(None, max_length=100)
    team_id: int = 0
    role_id: int = 0


class DeveloperResponse(ApiModel):
    id: int
    firstname: str | None
    lastname: str | None
    team_id: int
    role_id: int
