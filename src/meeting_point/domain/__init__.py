"""Domain layer - core models, errors and ports."""

from meeting_point.domain.errors import (
    InsufficientMembersError,
    MeetingPointError,
    MissingDepartureError,
    NoStationsFoundError,
    RoutingError,
    RoutingFailedError,
    RoutingUnavailableError,
)
from meeting_point.domain.models import (
    CandidateResult,
    Coordinate,
    Member,
    OptimizationMode,
    SearchSettings,
    Station,
    TransportMode,
    TravelTimeEntry,
)
from meeting_point.domain.ports import RoadRouter, StationCatalog, TravelTimeEstimator

__all__ = [
    "CandidateResult",
    "Coordinate",
    "InsufficientMembersError",
    "MeetingPointError",
    "Member",
    "MissingDepartureError",
    "NoStationsFoundError",
    "OptimizationMode",
    "RoadRouter",
    "RoutingError",
    "RoutingFailedError",
    "RoutingUnavailableError",
    "SearchSettings",
    "Station",
    "StationCatalog",
    "TransportMode",
    "TravelTimeEstimator",
    "TravelTimeEntry",
]
