"""Travel time estimation service."""

import logging

from meeting_point.domain.errors import RoutingError, RoutingFailedError
from meeting_point.domain.geo import distance_km
from meeting_point.domain.models.coordinate import Coordinate
from meeting_point.domain.models.member import TransportMode
from meeting_point.domain.ports.road_router import RoadRouter
from meeting_point.domain.ports.travel_time_estimator import TravelTimeEstimator

logger = logging.getLogger(__name__)

# Rail is approximated from straight-line distance; there is no transit graph.
RAIL_AVERAGE_SPEED_KMH = 40.0
RAIL_TRANSFER_ALLOWANCE_SECONDS = 600.0
RAIL_ACCESS_ALLOWANCE_SECONDS = 300.0


def estimate_rail_travel_time(origin: Coordinate, destination: Coordinate) -> float:
    """Estimate rail travel time in seconds from the great-circle distance.

    Assumes an average line speed of 40 km/h plus a fixed transfer allowance
    (10 min) and station access allowance (5 min). Never fails.
    """
    ride_seconds = distance_km(origin, destination) / RAIL_AVERAGE_SPEED_KMH * 3600
    return ride_seconds + RAIL_TRANSFER_ALLOWANCE_SECONDS + RAIL_ACCESS_ALLOWANCE_SECONDS


class TravelTimeService(TravelTimeEstimator):
    """Mode-agnostic travel time estimator.

    Car times come from the road router; rail times are computed locally.
    """

    def __init__(self, road_router: RoadRouter | None = None) -> None:
        """Initialize with an optional road router for car estimates."""
        self._road_router = road_router

    async def estimate_travel_time(
        self, origin: Coordinate, destination: Coordinate, mode: TransportMode
    ) -> float:
        """Estimate travel time in seconds for the given transport mode."""
        if mode is TransportMode.RAIL:
            return estimate_rail_travel_time(origin, destination)
        if mode is TransportMode.CAR:
            return await self._estimate_car_travel_time(origin, destination)
        raise RoutingFailedError(f"unsupported transport mode: {mode!r}")

    async def _estimate_car_travel_time(self, origin: Coordinate, destination: Coordinate) -> float:
        if self._road_router is None:
            raise RoutingFailedError("no road router configured for car travel")

        try:
            return await self._road_router.route(origin, destination)
        except RoutingError:
            raise
        except Exception as e:
            logger.warning(f"Road router raised unexpected error: {e}")
            raise RoutingFailedError(str(e) or e.__class__.__name__) from e
