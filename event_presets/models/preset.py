"""Preset model with Pydantic v2 validation."""

import logging
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from event_presets.constants import DELETED_SUFFIX
from event_presets.exceptions import EmptyTitleError
from event_presets.identifiers import validate_identifier

logger = logging.getLogger(__name__)


class Preset(BaseModel):
    """A user's intent to create and maintain one calendar event.

    The identifier of the calendar event stays unset until the event has
    been created in a store. It is only validated by
    :meth:`set_external_identifier`; construction and decoding accept any
    string.
    """

    model_config = ConfigDict(validate_assignment=True)

    title: str
    date: datetime
    external_identifier: Optional[str] = None

    @field_validator("title")
    @classmethod
    def title_not_empty(cls, v: str) -> str:
        """Refuse empty titles."""
        if not v:
            logger.debug("Failed to create preset, title was empty")
            raise EmptyTitleError("Preset title must not be empty")
        return v

    @field_validator("date")
    @classmethod
    def truncate_microseconds(cls, v: datetime) -> datetime:
        """Keep whole seconds only, like calendar backends do."""
        return v.replace(microsecond=0)

    @classmethod
    def create(
        cls, title: str, date: datetime, external_identifier: str | None = None
    ) -> "Preset":
        """Create a preset; raises EmptyTitleError if title is empty."""
        return cls(title=title, date=date, external_identifier=external_identifier)

    def set_external_identifier(self, candidate: str) -> None:
        """Store candidate as the event identifier after checking its shape.

        Raises:
            MalformedIdentifierError: If candidate is not an identifier. The
                stored identifier is left unchanged.
        """
        validate_identifier(candidate)
        self.external_identifier = candidate

    @property
    def is_orphaned(self) -> bool:
        """True if the preset was tagged as having lost its calendar event."""
        return self.title.endswith(DELETED_SUFFIX)

    def mark_orphaned(self) -> None:
        """Tag the title to show the calendar event was deleted elsewhere."""
        if not self.is_orphaned:
            self.title += DELETED_SUFFIX

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict (None identifier omitted)."""
        return self.model_dump(mode="json", exclude_none=True)

    @classmethod
    def from_dict(cls, data: Any) -> Optional["Preset"]:
        """Decode a preset, or None if title or date cannot be recovered."""
        if not isinstance(data, dict):
            logger.debug(f"Unable to decode preset from {type(data).__name__}")
            return None
        try:
            return cls.model_validate(data)
        except (ValidationError, EmptyTitleError) as e:
            logger.debug(f"Unable to decode preset: {e}")
            return None
