"""Errors raised by the meeting point search and its collaborators."""


class MeetingPointError(Exception):
    """Base class for errors that abort a meeting point search."""


class MissingDepartureError(MeetingPointError):
    """A member has no departure coordinate set."""

    def __init__(self, member_name: str) -> None:
        self.member_name = member_name
        super().__init__(f"Member '{member_name}' has no departure location set")


class InsufficientMembersError(MeetingPointError):
    """Fewer than two members were given."""

    def __init__(self, member_count: int) -> None:
        self.member_count = member_count
        super().__init__(f"At least 2 members are required, got {member_count}")


class NoStationsFoundError(MeetingPointError):
    """The station catalog returned no candidates near the centroid."""

    def __init__(self) -> None:
        super().__init__("No stations found in the station catalog")


class RoutingError(Exception):
    """A travel time could not be estimated for one member and destination.

    Handled per candidate by the search; never aborts it.
    """


class RoutingUnavailableError(RoutingError):
    """The routing collaborator reported that no route exists."""

    def __init__(self, message: str = "No route found") -> None:
        super().__init__(message)


class RoutingFailedError(RoutingError):
    """The routing collaborator failed for any other reason."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Routing failed: {reason}")
