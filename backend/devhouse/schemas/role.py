"""Role Schemas — name is checked for emptiness by the service, not here.

Design Decisions:
    - name optional at the schema level so an empty/absent name yields the
      service's "Invalid role data" message instead of a generic validation error
"""

from pydantic import Field

from devhouse.schemas.common import ApiModel


class RoleCreate(ApiModel):
    name: str | None = Field(None, max_length=200, examples=["Software Engineer"])


class RoleUpdate(ApiModel):
    name: str | None = Field(None, max_length=200, examples=["Senior Software Engineer"])


class RoleResponse(ApiModel):
    id: int
    name: str
