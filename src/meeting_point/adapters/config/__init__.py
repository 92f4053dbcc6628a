"""Configuration adapters."""

from meeting_point.adapters.config.app_config import AppConfig
from meeting_point.adapters.config.member_configuration_loader import MemberConfigurationLoader

__all__ = ["AppConfig", "MemberConfigurationLoader"]
