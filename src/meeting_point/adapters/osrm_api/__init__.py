"""OSRM adapters for road routing."""

from meeting_point.adapters.osrm_api.http_client import OsrmHttpClient
from meeting_point.adapters.osrm_api.osrm_road_router import OsrmRoadRouter

__all__ = ["OsrmHttpClient", "OsrmRoadRouter"]
