"""Reference to a calendar inside an event store."""

from pydantic import BaseModel, ConfigDict


class CalendarRef(BaseModel):
    """Calendar that events are written to."""

    model_config = ConfigDict(frozen=True)

    identifier: str
    title: str
