"""Tests for candidate station selection."""

import pytest

from meeting_point.application.services import nearest_stations
from meeting_point.domain.geo import distance_km
from meeting_point.domain.models import Coordinate, Station

QUERY = Coordinate(latitude=35.69, longitude=139.76)


def _station(station_id: str, latitude: float, longitude: float) -> Station:
    return Station(
        id=station_id,
        name=f"Station {station_id}",
        coordinate=Coordinate(latitude=latitude, longitude=longitude),
        line_name="Test Line",
        region_code=13,
    )


@pytest.fixture
def catalog() -> list[Station]:
    """Stations at increasing distances from QUERY, deliberately out of order."""
    return [
        _station("far", 35.90, 139.90),
        _station("near", 35.691, 139.761),
        _station("mid", 35.75, 139.80),
        _station("nearest", 35.69, 139.7601),
        _station("farthest", 36.50, 140.50),
    ]


def test_results_are_sorted_by_distance(catalog: list[Station]) -> None:
    """Given a catalog, when selecting candidates, then they ascend by distance to the query."""
    result = nearest_stations(QUERY, catalog, limit=5)

    distances = [distance_km(QUERY, station.coordinate) for station in result]
    assert distances == sorted(distances)
    assert [station.id for station in result] == ["nearest", "near", "mid", "far", "farthest"]


@pytest.mark.parametrize("limit", [1, 2, 5, 10])
def test_result_length_is_min_of_limit_and_catalog_size(
    catalog: list[Station], limit: int
) -> None:
    """Given a limit, then at most min(limit, catalog size) stations are returned."""
    assert len(nearest_stations(QUERY, catalog, limit)) == min(limit, len(catalog))


def test_empty_catalog_returns_empty_list() -> None:
    """Given an empty catalog, when selecting candidates, then nothing is returned."""
    assert nearest_stations(QUERY, [], limit=3) == []


def test_ties_keep_catalog_order() -> None:
    """Given stations at the same place, then they keep their catalog order."""
    first = _station("first", 35.70, 139.77)
    second = _station("second", 35.70, 139.77)
    third = _station("third", 35.70, 139.77)

    result = nearest_stations(QUERY, [first, second, third], limit=3)

    assert [station.id for station in result] == ["first", "second", "third"]


def test_catalog_is_not_mutated(catalog: list[Station]) -> None:
    """Given a catalog list, when selecting candidates, then the list is left unchanged."""
    original = list(catalog)

    nearest_stations(QUERY, catalog, limit=2)

    assert catalog == original


def test_accepts_any_iterable(catalog: list[Station]) -> None:
    """Given a generator of stations, when selecting candidates, then it works like a list."""
    result = nearest_stations(QUERY, (station for station in catalog), limit=1)

    assert [station.id for station in result] == ["nearest"]


@pytest.mark.parametrize("limit", [0, -1])
def test_non_positive_limit_raises(catalog: list[Station], limit: int) -> None:
    """Given a non-positive limit, when selecting candidates, then ValueError is raised."""
    with pytest.raises(ValueError, match="limit must be positive"):
        nearest_stations(QUERY, catalog, limit)
