"""Travel time estimator port."""

from typing import Protocol

from meeting_point.domain.models.coordinate import Coordinate
from meeting_point.domain.models.member import TransportMode


class TravelTimeEstimator(Protocol):
    """Port for estimating travel time between two coordinates for a transport mode."""

    async def estimate_travel_time(
        self, origin: Coordinate, destination: Coordinate, mode: TransportMode
    ) -> float:
        """Return the estimated travel time in seconds.

        Raises a RoutingError subclass when no estimate can be produced.
        """
        ...
