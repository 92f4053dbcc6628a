"""Application services."""

from meeting_point.application.services.candidate_selector import nearest_stations
from meeting_point.application.services.meeting_point_service import MeetingPointService
from meeting_point.application.services.travel_time_service import (
    TravelTimeService,
    estimate_rail_travel_time,
)

__all__ = [
    "MeetingPointService",
    "TravelTimeService",
    "estimate_rail_travel_time",
    "nearest_stations",
]
