"""Constants for the OSRM routing adapter.

API documentation: https://project-osrm.org/docs/v5.24.0/api/#route-service
The public demo server allows at most one request per second.
"""

OSRM_DEFAULT_BASE_URL = "https://router.project-osrm.org"
OSRM_DEFAULT_PROFILE = "driving"
OSRM_ROUTE_SERVICE = "route/v1"

# Single best route only, no geometry or turn-by-turn steps
OSRM_ROUTE_PARAMS = {
    "alternatives": "false",
    "overview": "false",
    "steps": "false",
}

OSRM_CODE_OK = "Ok"
# Codes meaning the coordinates cannot be connected by road
OSRM_NO_ROUTE_CODES = frozenset({"NoRoute", "NoSegment"})

DEFAULT_HEADERS = {
    "Accept": "application/json",
}
