"""Station catalog port."""

from collections.abc import Sequence
from typing import Protocol

from meeting_point.domain.models.station import Station


class StationCatalog(Protocol):
    """Port for reading the set of known stations."""

    async def all_stations(self) -> Sequence[Station]:
        """Return a snapshot of every station in the catalog, in catalog order."""
        ...
