"""Meeting point search service."""

import asyncio
import logging
from collections.abc import Sequence

from meeting_point.application.services.candidate_selector import nearest_stations
from meeting_point.domain.errors import (
    InsufficientMembersError,
    MissingDepartureError,
    NoStationsFoundError,
    RoutingError,
)
from meeting_point.domain.geo import centroid
from meeting_point.domain.models.coordinate import Coordinate
from meeting_point.domain.models.meeting_result import CandidateResult, TravelTimeEntry
from meeting_point.domain.models.member import Member
from meeting_point.domain.models.search_settings import OptimizationMode, SearchSettings
from meeting_point.domain.models.station import Station
from meeting_point.domain.ports.station_catalog import StationCatalog
from meeting_point.domain.ports.travel_time_estimator import TravelTimeEstimator

logger = logging.getLogger(__name__)

MIN_MEMBERS = 2
DEFAULT_MAX_CONCURRENCY = 8


class MeetingPointService:
    """Service for finding the best station for a group to meet at.

    The service holds no state between searches. Every call re-reads the
    station catalog and runs independently.
    """

    def __init__(
        self,
        station_catalog: StationCatalog,
        travel_time_estimator: TravelTimeEstimator,
        max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
    ) -> None:
        """Initialize with a station catalog and a travel time estimator.

        Args:
            station_catalog: Source of candidate stations.
            travel_time_estimator: Estimator used for every (station, member) pair.
            max_concurrency: Upper bound on travel time estimations in flight.
        """
        if max_concurrency < 1:
            raise ValueError(f"max_concurrency must be at least 1, got {max_concurrency}")
        self._station_catalog = station_catalog
        self._travel_time_estimator = travel_time_estimator
        self._max_concurrency = max_concurrency

    async def search(
        self, members: Sequence[Member], settings: SearchSettings
    ) -> list[CandidateResult]:
        """Run a search with the given settings."""
        return await self.find_meeting_point(
            members,
            mode=settings.mode,
            candidate_count=settings.candidate_count,
            result_count=settings.result_count,
        )

    async def find_meeting_point(
        self,
        members: Sequence[Member],
        mode: OptimizationMode = OptimizationMode.MIN_TOTAL,
        candidate_count: int = 50,
        result_count: int = 5,
    ) -> list[CandidateResult]:
        """Find the best meeting stations for a group.

        Takes the centroid of all departures, evaluates every member's travel
        time to the ``candidate_count`` stations nearest to it, and returns the
        ``result_count`` best candidates ranked by total or maximum travel time.

        A candidate for which any member's travel time cannot be estimated is
        dropped entirely. An empty list therefore means no candidate was
        reachable by everyone, which is not an error.

        Raises:
            MissingDepartureError: A member has no departure coordinate.
            InsufficientMembersError: Fewer than two members were given.
            NoStationsFoundError: The catalog produced no candidates.
        """
        if candidate_count <= 0:
            raise ValueError(f"candidate_count must be positive, got {candidate_count}")
        if result_count <= 0:
            raise ValueError(f"result_count must be positive, got {result_count}")

        departures = self._collect_departures(members)

        meeting_centroid = centroid(departures)
        logger.info(
            f"Searching meeting point for {len(members)} members around "
            f"({meeting_centroid.latitude:.5f}, {meeting_centroid.longitude:.5f})"
        )

        stations = await self._station_catalog.all_stations()
        candidates = nearest_stations(meeting_centroid, stations, candidate_count)
        if not candidates:
            raise NoStationsFoundError()
        logger.debug(f"Evaluating {len(candidates)} candidate station(s)")

        results = await self._evaluate_candidates(candidates, members, departures)
        logger.info(f"{len(results)} of {len(candidates)} candidate(s) reachable by every member")

        ranked = self.rank_results(results, mode)
        return ranked[:result_count]

    @staticmethod
    def rank_results(
        results: list[CandidateResult], mode: OptimizationMode
    ) -> list[CandidateResult]:
        """Sort results ascending by total or maximum travel time.

        The sort is stable, so ties keep the incoming (nearest-first) order.
        """
        if mode is OptimizationMode.MIN_MAX:
            return sorted(results, key=lambda result: result.max_seconds)
        return sorted(results, key=lambda result: result.total_seconds)

    @staticmethod
    def _collect_departures(members: Sequence[Member]) -> list[Coordinate]:
        """Validate members and return their departure coordinates in order."""
        departures = []
        for member in members:
            if member.departure is None:
                raise MissingDepartureError(member.name)
            departures.append(member.departure)

        if len(departures) < MIN_MEMBERS:
            raise InsufficientMembersError(len(departures))
        return departures

    async def _evaluate_candidates(
        self,
        candidates: list[Station],
        members: Sequence[Member],
        departures: Sequence[Coordinate],
    ) -> list[CandidateResult]:
        """Evaluate all candidates concurrently, keeping nearest-first order.

        If the search fails or is cancelled, every estimate still in flight
        is cancelled before the error propagates.
        """
        semaphore = asyncio.Semaphore(self._max_concurrency)
        tasks = [
            asyncio.ensure_future(
                self._evaluate_candidate(station, members, departures, semaphore)
            )
            for station in candidates
        ]
        try:
            evaluated = await asyncio.gather(*tasks)
        except BaseException:
            await _cancel_and_wait(tasks)
            raise
        return [result for result in evaluated if result is not None]

    async def _evaluate_candidate(
        self,
        station: Station,
        members: Sequence[Member],
        departures: Sequence[Coordinate],
        semaphore: asyncio.Semaphore,
    ) -> CandidateResult | None:
        """Evaluate every member's travel time to one station.

        Returns None if any member's estimate fails; remaining estimates for
        the station are cancelled.
        """
        tasks = [
            asyncio.ensure_future(self._estimate(departure, station, member, semaphore))
            for member, departure in zip(members, departures, strict=True)
        ]
        try:
            durations = await asyncio.gather(*tasks)
        except RoutingError as e:
            failed_member = _failed_member_name(members, tasks, e)
            await _cancel_and_wait(tasks)
            logger.info(
                f"Dropping candidate {station.name} ({station.id}): "
                f"no travel time for {failed_member}: {e}"
            )
            return None
        except BaseException:
            await _cancel_and_wait(tasks)
            raise

        entries = [
            TravelTimeEntry(
                member_id=member.id,
                member_name=member.name,
                duration_seconds=duration,
                transport_mode=member.transport_mode,
            )
            for member, duration in zip(members, durations, strict=True)
        ]
        return CandidateResult.from_entries(station, entries)

    async def _estimate(
        self,
        departure: Coordinate,
        station: Station,
        member: Member,
        semaphore: asyncio.Semaphore,
    ) -> float:
        async with semaphore:
            return await self._travel_time_estimator.estimate_travel_time(
                departure, station.coordinate, member.transport_mode
            )


async def _cancel_and_wait(tasks: Sequence[asyncio.Future]) -> None:
    """Cancel tasks and wait until all of them have finished unwinding."""
    for task in tasks:
        task.cancel()
    await asyncio.gather(*tasks, return_exceptions=True)


def _failed_member_name(
    members: Sequence[Member], tasks: Sequence[asyncio.Future], error: BaseException
) -> str:
    """Name of the member whose estimate raised ``error``."""
    for member, task in zip(members, tasks, strict=True):
        if task.done() and not task.cancelled() and task.exception() is error:
            return member.name
    return "unknown member"
