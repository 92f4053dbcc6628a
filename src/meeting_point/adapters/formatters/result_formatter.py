"""Formatters for meeting point search results."""

import json
from collections.abc import Sequence
from typing import Any

from meeting_point.domain.models.meeting_result import CandidateResult
from meeting_point.domain.models.search_settings import OptimizationMode
from meeting_point.domain.models.station import Station


class ResultFormatter:
    """Renders ranked candidate results as plain text or JSON."""

    def __init__(self, mode: OptimizationMode = OptimizationMode.MIN_TOTAL) -> None:
        """Initialize the formatter.

        Args:
            mode: Ranking mode, used to label which aggregate decided the order.
        """
        self.mode = mode

    @staticmethod
    def station_to_dict(station: Station) -> dict[str, Any]:
        return {
            "id": station.id,
            "name": station.name,
            "latitude": station.latitude,
            "longitude": station.longitude,
            "line_name": station.line_name,
            "region_code": station.region_code,
        }

    def result_to_dict(self, rank: int, result: CandidateResult) -> dict[str, Any]:
        """Convert one ranked result to a JSON-serializable dict."""
        return {
            "rank": rank,
            "station": self.station_to_dict(result.station),
            "total_seconds": round(result.total_seconds, 1),
            "max_seconds": round(result.max_seconds, 1),
            "members": [
                {
                    "id": entry.member_id,
                    "name": entry.member_name,
                    "duration_seconds": round(entry.duration_seconds, 1),
                    "transport_mode": entry.transport_mode.value,
                }
                for entry in result.entries
            ],
        }

    def format_json(self, results: Sequence[CandidateResult]) -> str:
        payload = {
            "mode": self.mode.value,
            "results": [
                self.result_to_dict(rank, result) for rank, result in enumerate(results, start=1)
            ],
        }
        return json.dumps(payload, indent=2, ensure_ascii=False)

    def format_text(self, results: Sequence[CandidateResult]) -> str:
        """Format results as a human-readable ranking."""
        if not results:
            return "No station is reachable by every member."

        ranked_by = "total" if self.mode is OptimizationMode.MIN_TOTAL else "longest trip"
        lines = [f"Best meeting points (ranked by {ranked_by} travel time):", ""]
        for rank, result in enumerate(results, start=1):
            station = result.station
            line_label = f" [{station.line_name}]" if station.line_name else ""
            lines.append(f"{rank}. {station.name}{line_label}")
            lines.append(f"   total {result.formatted_total}, longest {result.formatted_max}")
            for entry in result.entries:
                lines.append(
                    f"   - {entry.member_name}: {entry.formatted_duration}"
                    f" ({entry.transport_mode.value})"
                )
            lines.append("")
        return "\n".join(lines).rstrip()

    @staticmethod
    def format_stations(stations: Sequence[Station]) -> str:
        """Format a list of stations, one per line."""
        return "\n".join(
            f"{station.name} [{station.line_name}] "
            f"({station.latitude:.5f}, {station.longitude:.5f})  ID: {station.id}"
            for station in stations
        )
