"""Station catalog adapters."""

from meeting_point.adapters.station_catalog.csv_station_catalog import (
    CsvStationCatalog,
    StationCatalogError,
)
from meeting_point.adapters.station_catalog.in_memory_station_catalog import (
    InMemoryStationCatalog,
)

__all__ = ["CsvStationCatalog", "InMemoryStationCatalog", "StationCatalogError"]
