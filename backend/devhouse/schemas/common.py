"""Common Schemas — camelCase base model and the message envelope.

Invariants:
    - Wire format is camelCase (teamId, projectTypeId); Python side is snake_case
    - MessageResponse serializes as {"Message": "..."}

Design Decisions:
    - alias_generator over per-field aliases: one place decides the wire casing
    - populate_by_name: tests and internal callers may use snake_case keys
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base for every request/response body."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )


class MessageResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str = Field(alias="Message")
