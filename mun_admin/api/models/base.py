"""Shared base classes for API models.

Field names are snake_case in Python and camelCase on the wire. Requests
accept either spelling; responses are always rendered camelCase.
"""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

# ISO 8601 with Z suffix for UTC timestamps
DateTimeWithZ = Annotated[
    datetime,
    PlainSerializer(
        lambda v: v.isoformat().replace("+00:00", "Z") if v else None, return_type=str
    ),
]


class CamelModel(BaseModel):
    """Request model base: camelCase aliases, snake_case also accepted."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RecordResponse(CamelModel):
    """Response model base, validated straight from domain records."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
