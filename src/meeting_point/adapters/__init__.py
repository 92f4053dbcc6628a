"""Adapters layer - external system integrations."""

from meeting_point.adapters.config import AppConfig, MemberConfigurationLoader
from meeting_point.adapters.formatters import ResultFormatter
from meeting_point.adapters.osrm_api import OsrmHttpClient, OsrmRoadRouter
from meeting_point.adapters.station_catalog import (
    CsvStationCatalog,
    InMemoryStationCatalog,
    StationCatalogError,
)

__all__ = [
    "AppConfig",
    "CsvStationCatalog",
    "InMemoryStationCatalog",
    "MemberConfigurationLoader",
    "OsrmHttpClient",
    "OsrmRoadRouter",
    "ResultFormatter",
    "StationCatalogError",
]
