"""12-factor configuration adapter using environment variables and TOML config."""

import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from meeting_point.adapters.osrm_api.constants import OSRM_DEFAULT_BASE_URL, OSRM_DEFAULT_PROFILE
from meeting_point.domain.models.search_settings import OptimizationMode, SearchSettings

# Bounds offered to users; the search itself accepts any positive count
MIN_CANDIDATE_COUNT = 30
MAX_CANDIDATE_COUNT = 100
MIN_RESULT_COUNT = 3
MAX_RESULT_COUNT = 10


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Search configuration
    optimization_mode: str = Field(
        default="total",
        description="Ranking mode: 'total' (minimize summed time) or 'max' (minimize longest trip)",
    )
    candidate_count: int = Field(
        default=50,
        ge=MIN_CANDIDATE_COUNT,
        le=MAX_CANDIDATE_COUNT,
        description="Number of stations nearest to the centroid to evaluate",
    )
    result_count: int = Field(
        default=5,
        ge=MIN_RESULT_COUNT,
        le=MAX_RESULT_COUNT,
        description="Number of ranked stations to return",
    )
    max_concurrent_routes: int = Field(
        default=8,
        ge=1,
        description="Maximum number of travel time estimations in flight at once",
    )

    # Station catalog
    stations_csv: str = Field(
        default="stations.csv",
        description="Path to the station CSV (station_cd,station_name,lat,lon,line_name,pref_cd)",
    )

    # OSRM road routing configuration
    osrm_base_url: str = Field(
        default=OSRM_DEFAULT_BASE_URL, description="Base URL of the OSRM server"
    )
    osrm_profile: str = Field(default=OSRM_DEFAULT_PROFILE, description="OSRM routing profile")
    osrm_timeout_seconds: float = Field(
        default=10.0, gt=0, description="Timeout for a single OSRM request in seconds"
    )
    osrm_min_delay_seconds: float = Field(
        default=1.0,
        ge=0,
        description="Minimum delay between OSRM requests (public server allows 1 request/s)",
    )

    # TOML config file with [search] settings and [[members]] entries
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file for members and search settings",
    )

    @field_validator("optimization_mode")
    @classmethod
    def validate_optimization_mode(cls, v: str) -> str:
        """Validate optimization mode is either 'total' or 'max'."""
        mode = v.strip().lower()
        if mode not in ("total", "max"):
            raise ValueError("optimization_mode must be either 'total' or 'max'")
        return mode

    def load_toml_data(self) -> dict[str, Any]:
        """Load and parse the TOML config file."""
        if not self.config_file:
            raise ValueError("config_file must be set to load TOML configuration")

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            return tomllib.load(f)

    def with_toml_overrides(self) -> "AppConfig":
        """Return a config where the TOML [search] table overrides current values.

        Overrides are validated like any other source.
        """
        if not self.config_file:
            return self

        search = self.load_toml_data().get("search", {})
        if not isinstance(search, dict):
            raise ValueError("[search] in the config file must be a table")

        known = set(type(self).model_fields)
        overrides = {key: value for key, value in search.items() if key in known}
        if not overrides:
            return self
        return type(self)(**{**self.model_dump(), **overrides})

    def search_settings(self) -> SearchSettings:
        """Build search settings from this configuration."""
        return SearchSettings(
            mode=OptimizationMode(self.optimization_mode),
            candidate_count=self.candidate_count,
            result_count=self.result_count,
        )
