"""Geographic helpers: great-circle distance and group centroid."""

import math
from collections.abc import Iterable

from meeting_point.domain.models.coordinate import Coordinate

EARTH_RADIUS_KM = 6371.0


def distance_km(a: Coordinate, b: Coordinate) -> float:
    """Great-circle distance between two coordinates in kilometres (haversine)."""
    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    d_lat = math.radians(b.latitude - a.latitude)
    d_lon = math.radians(b.longitude - a.longitude)

    h = math.sin(d_lat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
    # Clamp against rounding drift above 1.0 for near-antipodal points
    h = min(1.0, h)
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def centroid(coordinates: Iterable[Coordinate]) -> Coordinate:
    """Arithmetic mean of latitudes and longitudes, taken independently.

    This is a planar approximation. It is fine at national scale but wrong
    for groups spanning the antimeridian or close to a pole.
    """
    points = list(coordinates)
    if not points:
        raise ValueError("Cannot compute the centroid of no coordinates")
    count = len(points)
    return Coordinate(
        latitude=sum(p.latitude for p in points) / count,
        longitude=sum(p.longitude for p in points) / count,
    )
