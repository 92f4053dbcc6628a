"""Station catalog adapter backed by a station data CSV file.

Expected columns (header row required, extra columns ignored):
station_cd,station_name,lat,lon,line_name,pref_cd
"""

import asyncio
import csv
import logging
import math
from collections.abc import Sequence
from pathlib import Path

from meeting_point.domain.models.coordinate import Coordinate
from meeting_point.domain.models.station import Station
from meeting_point.domain.ports.station_catalog import StationCatalog

logger = logging.getLogger(__name__)

CSV_COLUMN_COUNT = 6
MAX_LATITUDE = 90.0
MAX_LONGITUDE = 180.0


class StationCatalogError(Exception):
    """The station catalog could not be read."""


def parse_station_row(columns: list[str]) -> Station | None:
    """Parse one CSV row into a Station, or None if the row is unusable."""
    if len(columns) < CSV_COLUMN_COUNT:
        return None

    fields = [column.strip() for column in columns[:CSV_COLUMN_COUNT]]
    station_cd, station_name, lat, lon, line_name, pref_cd = fields
    try:
        station_id = int(station_cd)
        latitude = float(lat)
        longitude = float(lon)
        region_code = int(pref_cd)
    except ValueError:
        return None

    if not (math.isfinite(latitude) and math.isfinite(longitude)):
        return None
    if abs(latitude) > MAX_LATITUDE or abs(longitude) > MAX_LONGITUDE:
        return None

    return Station(
        id=str(station_id),
        name=station_name,
        coordinate=Coordinate(latitude=latitude, longitude=longitude),
        line_name=line_name,
        region_code=region_code,
    )


class CsvStationCatalog(StationCatalog):
    """Adapter reading stations from a CSV file on every snapshot request."""

    def __init__(self, csv_path: str | Path) -> None:
        """Initialize with the path to the station CSV file."""
        self._csv_path = Path(csv_path)

    async def all_stations(self) -> Sequence[Station]:
        """Read and return all valid stations in file order."""
        return await asyncio.to_thread(self.load)

    def load(self) -> list[Station]:
        """Read the CSV synchronously, skipping the header, blank and invalid rows."""
        if not self._csv_path.exists():
            raise StationCatalogError(f"Station CSV file not found: {self._csv_path}")

        stations: list[Station] = []
        skipped = 0
        with open(self._csv_path, encoding="utf-8", newline="") as f:
            reader = csv.reader(f)
            next(reader, None)  # header
            for line_number, row in enumerate(reader, start=2):
                if not any(cell.strip() for cell in row):
                    continue
                station = parse_station_row(row)
                if station is None:
                    skipped += 1
                    logger.debug(f"Skipping invalid station row {line_number}: {row}")
                    continue
                stations.append(station)

        if skipped:
            logger.info(f"Skipped {skipped} invalid row(s) in {self._csv_path}")
        logger.debug(f"Loaded {len(stations)} station(s) from {self._csv_path}")
        return stations
