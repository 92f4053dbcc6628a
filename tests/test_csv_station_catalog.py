"""Tests for the CSV station catalog adapter."""

from pathlib import Path

import pytest

from meeting_point.adapters.station_catalog import CsvStationCatalog, StationCatalogError
from meeting_point.adapters.station_catalog.csv_station_catalog import parse_station_row
from meeting_point.domain.models import Coordinate

CSV_CONTENT = """station_cd,station_name,lat,lon,line_name,pref_cd
1130101,Tokyo,35.681236,139.767125,JR Yamanote Line,13
1130102, Kanda ,35.691690,139.770883, JR Yamanote Line ,13

not-a-number,Broken,35.0,139.0,Line,13
1130103,Akihabara,35.698683,139.774219,JR Yamanote Line,13,extra
1130104,Short,35.0,139.0
1130105,BadLat,north,139.0,Line,13
1130106,NotANumber,nan,nan,Line,13
"""


@pytest.fixture
def csv_path(tmp_path: Path) -> Path:
    path = tmp_path / "stations.csv"
    path.write_text(CSV_CONTENT, encoding="utf-8")
    return path


@pytest.mark.asyncio
async def test_loads_valid_rows_in_file_order(csv_path: Path) -> None:
    """Given a CSV with valid and invalid rows, when loading, then only valid rows are kept."""
    catalog = CsvStationCatalog(csv_path)

    stations = await catalog.all_stations()

    assert [station.name for station in stations] == ["Tokyo", "Kanda", "Akihabara"]


@pytest.mark.asyncio
async def test_fields_are_parsed_and_trimmed(csv_path: Path) -> None:
    """Given padded fields, when loading, then values are trimmed and typed."""
    stations = await CsvStationCatalog(csv_path).all_stations()
    kanda = stations[1]

    assert kanda.id == "1130102"
    assert kanda.name == "Kanda"
    assert kanda.line_name == "JR Yamanote Line"
    assert kanda.region_code == 13
    assert kanda.coordinate == Coordinate(latitude=35.691690, longitude=139.770883)


@pytest.mark.asyncio
async def test_file_is_reread_for_each_snapshot(csv_path: Path) -> None:
    """Given a changed file, when requesting a new snapshot, then the change is visible."""
    catalog = CsvStationCatalog(csv_path)
    first = await catalog.all_stations()

    csv_path.write_text(
        "station_cd,station_name,lat,lon,line_name,pref_cd\n1,Only,35.0,139.0,Line,13\n",
        encoding="utf-8",
    )
    second = await catalog.all_stations()

    assert len(first) == 3
    assert [station.name for station in second] == ["Only"]


@pytest.mark.asyncio
async def test_header_only_file_is_empty_catalog(tmp_path: Path) -> None:
    """Given a CSV with only a header, when loading, then the catalog is empty."""
    path = tmp_path / "empty.csv"
    path.write_text("station_cd,station_name,lat,lon,line_name,pref_cd\n", encoding="utf-8")

    assert await CsvStationCatalog(path).all_stations() == []


@pytest.mark.asyncio
async def test_missing_file_raises(tmp_path: Path) -> None:
    """Given a missing file, when loading, then StationCatalogError is raised."""
    catalog = CsvStationCatalog(tmp_path / "missing.csv")

    with pytest.raises(StationCatalogError, match="not found"):
        await catalog.all_stations()


@pytest.mark.parametrize(
    "row",
    [
        ["1", "A", "35.0", "139.0", "Line"],
        ["x", "A", "35.0", "139.0", "Line", "13"],
        ["1", "A", "35.0", "east", "Line", "13"],
        ["1", "A", "35.0", "139.0", "Line", "Tokyo"],
        ["1", "A", "nan", "nan", "Line", "13"],
        ["1", "A", "35.0", "inf", "Line", "13"],
        ["1", "A", "91.0", "139.0", "Line", "13"],
        ["1", "A", "35.0", "-180.5", "Line", "13"],
    ],
)
def test_parse_station_row_rejects_invalid_rows(row: list[str]) -> None:
    """Given a malformed row, when parsing, then None is returned."""
    assert parse_station_row(row) is None


def test_parse_station_row_normalizes_station_code() -> None:
    """Given a zero-padded station code, then the id is its integer form."""
    station = parse_station_row(["0042", "Tokyo", "35.68", "139.76", "Line", "13"])

    assert station is not None
    assert station.id == "42"
