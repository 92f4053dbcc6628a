"""Ports (interfaces) for the ports-and-adapters architecture."""

from meeting_point.domain.ports.road_router import RoadRouter
from meeting_point.domain.ports.station_catalog import StationCatalog
from meeting_point.domain.ports.travel_time_estimator import TravelTimeEstimator

__all__ = [
    "RoadRouter",
    "StationCatalog",
    "TravelTimeEstimator",
]
