"""Meeting point result domain models."""

from dataclasses import dataclass

from meeting_point.domain.models.member import TransportMode
from meeting_point.domain.models.station import Station


def format_duration(seconds: float) -> str:
    """Format a duration as whole hours and minutes, e.g. "1h 05m" or "42m".

    Partial minutes are truncated, not rounded.
    """
    total = int(seconds)
    hours, remainder = divmod(total, 3600)
    minutes = remainder // 60
    if hours > 0:
        return f"{hours}h {minutes:02d}m"
    return f"{minutes}m"


@dataclass(frozen=True)
class TravelTimeEntry:
    """Travel time of one member to one candidate station."""

    member_id: str
    member_name: str
    duration_seconds: float
    transport_mode: TransportMode

    @property
    def formatted_duration(self) -> str:
        return format_duration(self.duration_seconds)


@dataclass(frozen=True)
class CandidateResult:
    """A candidate station together with every member's travel time to it.

    Entries keep member order. ``total_seconds`` is their sum and
    ``max_seconds`` their maximum; use ``from_entries`` to keep them consistent.
    """

    station: Station
    entries: tuple[TravelTimeEntry, ...]
    total_seconds: float
    max_seconds: float

    @classmethod
    def from_entries(
        cls, station: Station, entries: list[TravelTimeEntry] | tuple[TravelTimeEntry, ...]
    ) -> "CandidateResult":
        """Build a result, deriving the aggregates from the entries."""
        if not entries:
            raise ValueError("A candidate result needs at least one travel time entry")
        durations = [entry.duration_seconds for entry in entries]
        return cls(
            station=station,
            entries=tuple(entries),
            total_seconds=sum(durations),
            max_seconds=max(durations),
        )

    @property
    def formatted_total(self) -> str:
        return format_duration(self.total_seconds)

    @property
    def formatted_max(self) -> str:
        return format_duration(self.max_seconds)
