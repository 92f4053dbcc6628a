"""Output formatters."""

from meeting_point.adapters.formatters.result_formatter import ResultFormatter

__all__ = ["ResultFormatter"]
