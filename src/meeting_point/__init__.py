"""Meeting point finder - pick the transit station that is fairest to reach for a group."""

__version__ = "0.1.0"
