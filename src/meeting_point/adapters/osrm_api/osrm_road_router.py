"""OSRM road router adapter for car travel times."""

import logging
from typing import Any

from meeting_point.adapters.osrm_api.constants import OSRM_CODE_OK, OSRM_NO_ROUTE_CODES
from meeting_point.adapters.osrm_api.http_client import OsrmHttpClient
from meeting_point.domain.errors import RoutingFailedError, RoutingUnavailableError
from meeting_point.domain.models.coordinate import Coordinate
from meeting_point.domain.ports.road_router import RoadRouter

logger = logging.getLogger(__name__)


class OsrmRoadRouter(RoadRouter):
    """Road router backed by an OSRM server's route service."""

    def __init__(self, http_client: OsrmHttpClient) -> None:
        """Initialize with an OSRM HTTP client."""
        self._http_client = http_client

    async def route(self, origin: Coordinate, destination: Coordinate) -> float:
        """Return the duration in seconds of the best car route."""
        payload = await self._http_client.fetch_route(origin, destination)
        return self.parse_duration(payload)

    @staticmethod
    def parse_duration(payload: dict[str, Any]) -> float:
        """Extract the first route's duration from an OSRM response.

        Raises:
            RoutingUnavailableError: OSRM found no route between the points.
            RoutingFailedError: OSRM reported another error or the payload is malformed.
        """
        code = payload.get("code")
        if code in OSRM_NO_ROUTE_CODES:
            raise RoutingUnavailableError(payload.get("message") or f"OSRM: {code}")
        if code != OSRM_CODE_OK:
            message = payload.get("message") or "no message"
            logger.warning(f"OSRM returned code {code}: {message}")
            raise RoutingFailedError(f"OSRM code {code}: {message}")

        routes = payload.get("routes")
        if not routes:
            raise RoutingUnavailableError("OSRM returned no routes")

        duration = routes[0].get("duration") if isinstance(routes[0], dict) else None
        if not isinstance(duration, (int, float)) or isinstance(duration, bool):
            raise RoutingFailedError("OSRM route has no numeric duration")
        return float(duration)
