"""Member configuration loader."""

import logging
from pathlib import Path
from typing import Any

from meeting_point.adapters.config.app_config import AppConfig
from meeting_point.domain.models.coordinate import Coordinate
from meeting_point.domain.models.member import Member, TransportMode

logger = logging.getLogger(__name__)


class MemberConfigurationLoader:
    """Loads members from the [[members]] tables of a TOML config file.

    Example:
        [[members]]
        name = "Aiko"
        latitude = 35.681
        longitude = 139.767
        departure_name = "Tokyo"
        transport_mode = "rail"
    """

    @staticmethod
    def _parse_transport_mode(value: Any, index: int) -> TransportMode:
        if value is None:
            return TransportMode.RAIL
        try:
            return TransportMode(str(value).strip().lower())
        except ValueError:
            raise ValueError(
                f"members[{index}]: transport_mode must be 'rail' or 'car', got {value!r}"
            ) from None

    @staticmethod
    def _parse_departure(member_data: dict[str, Any], index: int) -> Coordinate | None:
        latitude = member_data.get("latitude")
        longitude = member_data.get("longitude")
        if latitude is None and longitude is None:
            return None
        if latitude is None or longitude is None:
            raise ValueError(f"members[{index}]: latitude and longitude must be given together")
        try:
            return Coordinate(latitude=float(latitude), longitude=float(longitude))
        except (TypeError, ValueError):
            raise ValueError(f"members[{index}]: latitude and longitude must be numbers") from None

    @classmethod
    def load_member_from_data(cls, member_data: Any, index: int) -> Member:
        """Build a single member from a TOML table."""
        if not isinstance(member_data, dict):
            raise ValueError(f"members[{index}] must be a table")

        name = member_data.get("name")
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"members[{index}]: name is required")

        member = Member(
            name=name.strip(),
            departure=cls._parse_departure(member_data, index),
            transport_mode=cls._parse_transport_mode(member_data.get("transport_mode"), index),
            departure_name=str(member_data.get("departure_name", "")),
        )
        if member_data.get("id"):
            member.id = str(member_data["id"])
        return member

    @classmethod
    def load_from_data(cls, toml_data: dict[str, Any]) -> list[Member]:
        """Build members from parsed TOML data."""
        members_data = toml_data.get("members", [])
        if not isinstance(members_data, list):
            raise ValueError("members must be an array of tables ([[members]])")
        return [cls.load_member_from_data(data, index) for index, data in enumerate(members_data)]

    @classmethod
    def load(cls, config: AppConfig) -> list[Member]:
        """Load members from the config file referenced by the app config."""
        members = cls.load_from_data(config.load_toml_data())
        logger.debug(f"Loaded {len(members)} member(s) from {config.config_file}")
        return members

    @classmethod
    def load_file(cls, path: str | Path) -> list[Member]:
        """Load members from a TOML file path."""
        return cls.load(AppConfig(config_file=str(path)))
