"""Authorization model for calendar access."""

import json
import logging
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class EntityType(str, Enum):
    """Kind of schedulable item that access is granted for."""

    EVENT = "event"
    REMINDER = "reminder"


class AuthorizationStatus(str, Enum):
    """Access decision of the user for one entity type."""

    NOT_DETERMINED = "not_determined"
    RESTRICTED = "restricted"
    DENIED = "denied"
    AUTHORIZED = "authorized"


class AuthorizationState(BaseModel):
    """Authorization decisions per entity type.

    A missing entry means the user has not been asked yet. Once a decision
    is recorded, :meth:`decide` leaves it alone.
    """

    statuses: dict[EntityType, AuthorizationStatus] = Field(default_factory=dict)

    def status(self, entity_type: EntityType) -> AuthorizationStatus:
        """Current status for entity_type."""
        return self.statuses.get(entity_type, AuthorizationStatus.NOT_DETERMINED)

    def set_status(self, entity_type: EntityType, status: AuthorizationStatus) -> None:
        """Overwrite the status for entity_type."""
        self.statuses[entity_type] = status

    def decide(self, entity_type: EntityType, granted: bool) -> AuthorizationStatus:
        """Record the user's answer if nothing was decided yet.

        Returns:
            The status in effect after the call.
        """
        current = self.status(entity_type)
        if current != AuthorizationStatus.NOT_DETERMINED:
            return current

        status = AuthorizationStatus.AUTHORIZED if granted else AuthorizationStatus.DENIED
        self.statuses[entity_type] = status
        logger.info(f"Access to {entity_type.value} data {status.value}")
        return status

    def save(self, path: Path) -> None:
        """Write decisions to a JSON file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.model_dump_json(indent=2))

    @classmethod
    def load(cls, path: Path) -> "AuthorizationState":
        """Load decisions from a JSON file; missing or invalid files decide nothing."""
        if not path.exists():
            return cls()
        try:
            return cls.model_validate(json.loads(path.read_text()))
        except (OSError, ValueError) as e:
            logger.warning(f"Ignoring unreadable authorization file {path}: {e}")
            return cls()


_process_state = AuthorizationState()


def process_authorization_state() -> AuthorizationState:
    """Authorization state shared by every real calendar store in this process."""
    return _process_state
