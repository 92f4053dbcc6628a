"""Station domain model."""

from dataclasses import dataclass

from meeting_point.domain.models.coordinate import Coordinate


@dataclass(frozen=True)
class Station:
    """Represents a transit station from the station catalog."""

    id: str
    name: str
    coordinate: Coordinate
    line_name: str
    region_code: int

    @property
    def latitude(self) -> float:
        return self.coordinate.latitude

    @property
    def longitude(self) -> float:
        return self.coordinate.longitude
