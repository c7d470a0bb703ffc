"""Interaction log entry model."""

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class LogEntryType(str, Enum):
    """Kind of interaction recorded in the log."""

    QUERY = "query"
    EMAIL_SENT = "email_sent"


class LogEntry(BaseModel):
    """A processed query or an email-send event.

    Serialized with camelCase ``userId`` for API clients.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, use_enum_values=True)

    id: int
    query: str | None = None
    response: str
    timestamp: str = Field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )
    user_id: str = Field(..., alias="userId")
    type: LogEntryType = LogEntryType.QUERY
    recipient: str | None = None
