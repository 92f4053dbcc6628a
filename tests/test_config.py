"""Tests for configuration adapters."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from meeting_point.adapters.config import AppConfig, MemberConfigurationLoader
from meeting_point.domain.models import Coordinate, OptimizationMode, TransportMode

MEMBERS_TOML = """
[search]
optimization_mode = "max"
result_count = 3

[[members]]
name = "Aiko"
id = "aiko"
latitude = 35.681236
longitude = 139.767125
departure_name = "Tokyo"

[[members]]
name = "Ben"
latitude = 35.465798
longitude = 139.622314
transport_mode = "CAR"

[[members]]
name = "Chika"
"""


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    path = tmp_path / "config.toml"
    path.write_text(MEMBERS_TOML, encoding="utf-8")
    return path


def _write(tmp_path: Path, content: str) -> str:
    path = tmp_path / "config.toml"
    path.write_text(content, encoding="utf-8")
    return str(path)


class TestAppConfig:
    """Tests for AppConfig."""

    def test_config_loads_defaults(self) -> None:
        """Given no environment variables, when loading config, then defaults are used."""
        config = AppConfig()

        assert config.optimization_mode == "total"
        assert config.candidate_count == 50
        assert config.result_count == 5
        assert config.max_concurrent_routes == 8
        assert config.osrm_base_url == "https://router.project-osrm.org"
        assert config.osrm_profile == "driving"
        assert config.config_file is None

    def test_config_loads_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Given environment variables, when loading config, then they are used."""
        monkeypatch.setenv("OPTIMIZATION_MODE", "MAX")
        monkeypatch.setenv("CANDIDATE_COUNT", "80")
        monkeypatch.setenv("RESULT_COUNT", "10")
        monkeypatch.setenv("OSRM_BASE_URL", "http://localhost:5000")

        config = AppConfig()

        assert config.optimization_mode == "max"
        assert config.candidate_count == 80
        assert config.result_count == 10
        assert config.osrm_base_url == "http://localhost:5000"

    def test_config_validates_optimization_mode(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Given an unknown mode, when loading config, then validation error is raised."""
        monkeypatch.setenv("OPTIMIZATION_MODE", "fastest")

        with pytest.raises(ValueError, match="optimization_mode must be either"):
            AppConfig()

    @pytest.mark.parametrize(
        ("field", "value"),
        [
            ("candidate_count", 29),
            ("candidate_count", 101),
            ("result_count", 2),
            ("result_count", 11),
            ("max_concurrent_routes", 0),
            ("osrm_min_delay_seconds", -0.5),
        ],
    )
    def test_config_rejects_out_of_range_values(self, field: str, value: float) -> None:
        """Given a value outside the allowed range, when loading config, then it is rejected."""
        with pytest.raises(ValidationError):
            AppConfig(**{field: value})

    def test_search_settings_from_config(self) -> None:
        """Given a config, when building search settings, then values carry over."""
        config = AppConfig(optimization_mode="max", candidate_count=30, result_count=3)

        settings = config.search_settings()

        assert settings.mode is OptimizationMode.MIN_MAX
        assert settings.candidate_count == 30
        assert settings.result_count == 3

    def test_toml_search_table_overrides_environment(
        self, monkeypatch: pytest.MonkeyPatch, config_path: Path
    ) -> None:
        """Given [search] in TOML and env values, when applying overrides, then TOML wins."""
        monkeypatch.setenv("OPTIMIZATION_MODE", "total")
        monkeypatch.setenv("CANDIDATE_COUNT", "40")

        config = AppConfig(config_file=str(config_path)).with_toml_overrides()

        assert config.optimization_mode == "max"
        assert config.result_count == 3
        assert config.candidate_count == 40

    def test_toml_overrides_are_validated(self, tmp_path: Path) -> None:
        """Given an invalid value in [search], when applying overrides, then it is rejected."""
        path = _write(tmp_path, "[search]\nresult_count = 50\n")

        with pytest.raises(ValidationError):
            AppConfig(config_file=path).with_toml_overrides()

    def test_without_config_file_overrides_are_noop(self) -> None:
        """Given no config file, when applying overrides, then the same config is returned."""
        config = AppConfig()

        assert config.with_toml_overrides() is config

    def test_missing_config_file_raises(self, tmp_path: Path) -> None:
        """Given a missing config file, when loading TOML, then FileNotFoundError is raised."""
        config = AppConfig(config_file=str(tmp_path / "missing.toml"))

        with pytest.raises(FileNotFoundError):
            config.load_toml_data()


class TestMemberConfigurationLoader:
    """Tests for loading members from TOML."""

    def test_loads_members_in_order(self, config_path: Path) -> None:
        """Given [[members]] tables, when loading, then members are built in file order."""
        members = MemberConfigurationLoader.load_file(config_path)

        assert [member.name for member in members] == ["Aiko", "Ben", "Chika"]

    def test_member_fields(self, config_path: Path) -> None:
        """Given member tables, when loading, then fields and defaults are applied."""
        aiko, ben, chika = MemberConfigurationLoader.load_file(config_path)

        assert aiko.id == "aiko"
        assert aiko.departure == Coordinate(latitude=35.681236, longitude=139.767125)
        assert aiko.departure_name == "Tokyo"
        assert aiko.transport_mode is TransportMode.RAIL
        assert ben.transport_mode is TransportMode.CAR
        assert ben.id
        assert chika.has_departure is False

    def test_no_members_table_gives_empty_list(self) -> None:
        """Given TOML without members, when loading, then the list is empty."""
        assert MemberConfigurationLoader.load_from_data({"search": {}}) == []

    @pytest.mark.parametrize(
        ("member_data", "message"),
        [
            ({"latitude": 35.0, "longitude": 139.0}, "name is required"),
            ({"name": "  "}, "name is required"),
            ({"name": "A", "latitude": 35.0}, "given together"),
            ({"name": "A", "latitude": "north", "longitude": 139.0}, "must be numbers"),
            ({"name": "A", "transport_mode": "bicycle"}, "transport_mode"),
        ],
    )
    def test_invalid_member_raises(self, member_data: dict, message: str) -> None:
        """Given an invalid member table, when loading, then ValueError names the entry."""
        data = {"members": [{"name": "Ok"}, member_data]}

        with pytest.raises(ValueError, match=message) as exc_info:
            MemberConfigurationLoader.load_from_data(data)

        assert "members[1]" in str(exc_info.value)

    def test_members_must_be_array_of_tables(self) -> None:
        """Given members as a plain table, when loading, then ValueError is raised."""
        with pytest.raises(ValueError, match="array of tables"):
            MemberConfigurationLoader.load_from_data({"members": {"name": "A"}})

    def test_member_entry_must_be_table(self) -> None:
        """Given a non-table member entry, when loading, then ValueError is raised."""
        with pytest.raises(ValueError, match=r"members\[0\] must be a table"):
            MemberConfigurationLoader.load_from_data({"members": ["Aiko"]})
