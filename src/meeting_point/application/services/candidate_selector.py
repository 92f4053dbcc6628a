"""Candidate station selection."""

from collections.abc import Iterable

from meeting_point.domain.geo import distance_km
from meeting_point.domain.models.coordinate import Coordinate
from meeting_point.domain.models.station import Station


def nearest_stations(to: Coordinate, stations: Iterable[Station], limit: int) -> list[Station]:
    """Return up to ``limit`` stations ordered by ascending distance to ``to``.

    Ties keep catalog order (stable sort). The input is not modified.
    """
    if limit <= 0:
        raise ValueError(f"limit must be positive, got {limit}")

    ranked = sorted(stations, key=lambda station: distance_km(to, station.coordinate))
    return ranked[:limit]
