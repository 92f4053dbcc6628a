"""Station catalog adapter over a fixed list of stations."""

from collections.abc import Iterable, Sequence

from meeting_point.domain.models.station import Station
from meeting_point.domain.ports.station_catalog import StationCatalog


class InMemoryStationCatalog(StationCatalog):
    """Catalog holding an immutable snapshot of stations in memory."""

    def __init__(self, stations: Iterable[Station] = ()) -> None:
        self._stations = tuple(stations)

    async def all_stations(self) -> Sequence[Station]:
        return self._stations
