"""Road routing port."""

from typing import Protocol

from meeting_point.domain.models.coordinate import Coordinate


class RoadRouter(Protocol):
    """Port for car routing between two coordinates."""

    async def route(self, origin: Coordinate, destination: Coordinate) -> float:
        """Return the expected duration in seconds of the single best car route.

        Raises RoutingUnavailableError when no route exists and
        RoutingFailedError on any other failure.
        """
        ...
