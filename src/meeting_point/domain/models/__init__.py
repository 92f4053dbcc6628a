"""Domain models for the meeting point finder."""

from meeting_point.domain.models.coordinate import Coordinate
from meeting_point.domain.models.meeting_result import (
    CandidateResult,
    TravelTimeEntry,
    format_duration,
)
from meeting_point.domain.models.member import Member, TransportMode
from meeting_point.domain.models.search_settings import OptimizationMode, SearchSettings
from meeting_point.domain.models.station import Station

__all__ = [
    "CandidateResult",
    "Coordinate",
    "Member",
    "OptimizationMode",
    "SearchSettings",
    "Station",
    "TransportMode",
    "TravelTimeEntry",
    "format_duration",
]
