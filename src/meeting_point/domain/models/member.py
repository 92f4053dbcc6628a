"""Member domain model."""

import uuid
from dataclasses import dataclass, field
from enum import Enum

from meeting_point.domain.models.coordinate import Coordinate


class TransportMode(str, Enum):
    """How a member travels to the meeting point."""

    RAIL = "rail"
    CAR = "car"


@dataclass
class Member:
    """A person taking part in a meeting point search.

    Members are mutable: the caller sets the departure and transport mode
    before invoking a search. A member without a departure cannot take part.
    """

    name: str
    departure: Coordinate | None = None
    transport_mode: TransportMode = TransportMode.RAIL
    departure_name: str = ""
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @property
    def has_departure(self) -> bool:
        """Whether a departure coordinate has been set."""
        return self.departure is not None
