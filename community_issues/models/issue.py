"""
Issue model and status state machine.

The same model is used by the store, the API responses and the client, so
the JSON shape (camelCase keys, ISO-8601 timestamps) is defined once here.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ..errors import ValidationError


class IssueStatus(str, Enum):
    """Lifecycle status of an issue. Any status may move to either of the others."""
    OPEN = "open"
    IN_PROGRESS = "in-progress"
    RESOLVED = "resolved"


STATUS_VALUES = tuple(status.value for status in IssueStatus)

INVALID_STATUS_MESSAGE = f"Status must be one of {'|'.join(STATUS_VALUES)}"


def parse_status(value: object) -> IssueStatus:
    """Convert a raw value to IssueStatus or raise ValidationError."""
    try:
        return IssueStatus(value)
    except ValueError:
        raise ValidationError(INVALID_STATUS_MESSAGE) from None


def available_transitions(status: IssueStatus) -> list[IssueStatus]:
    """Statuses an issue can move to from `status` (every status but the current one)."""
    return [candidate for candidate in IssueStatus if candidate != status]


class Issue(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    title: str
    description: str
    category: str
    location: str
    contact: str | None = None
    status: IssueStatus = IssueStatus.OPEN
    created_at: datetime
    updated_at: datetime

    def to_json_dict(self) -> dict:
        """Serialize with API keys; an absent contact is omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
