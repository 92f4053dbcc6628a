"""HTTP client for the OSRM route service."""

import asyncio
import logging
import time
from typing import Any

import aiohttp

from meeting_point.adapters.api_rate_limiter import ApiRateLimiter
from meeting_point.adapters.api_request_logger import log_api_request, log_api_response
from meeting_point.adapters.osrm_api.constants import (
    DEFAULT_HEADERS,
    OSRM_DEFAULT_BASE_URL,
    OSRM_DEFAULT_PROFILE,
    OSRM_ROUTE_PARAMS,
    OSRM_ROUTE_SERVICE,
)
from meeting_point.domain.errors import RoutingFailedError
from meeting_point.domain.models.coordinate import Coordinate

logger = logging.getLogger(__name__)


def format_coordinates(origin: Coordinate, destination: Coordinate) -> str:
    """Format a coordinate pair the way OSRM expects: lon,lat;lon,lat."""
    return (
        f"{origin.longitude:.6f},{origin.latitude:.6f};"
        f"{destination.longitude:.6f},{destination.latitude:.6f}"
    )


class OsrmHttpClient:
    """HTTP client for OSRM route requests using a shared aiohttp session."""

    def __init__(
        self,
        session: aiohttp.ClientSession | None = None,
        base_url: str = OSRM_DEFAULT_BASE_URL,
        profile: str = OSRM_DEFAULT_PROFILE,
        timeout_seconds: float = 10.0,
        min_delay_seconds: float = 1.0,
    ) -> None:
        """Initialize the client.

        Args:
            session: aiohttp session used for requests.
            base_url: OSRM server base URL.
            profile: OSRM routing profile (e.g. "driving").
            timeout_seconds: Total timeout for a single request.
            min_delay_seconds: Minimum gap between requests to this server.
        """
        self._session = session
        self._base_url = base_url.rstrip("/")
        self._profile = profile
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self._rate_limiter = ApiRateLimiter.get_instance(
            f"osrm:{self._base_url}", min_delay_seconds
        )

    def route_url(self, origin: Coordinate, destination: Coordinate) -> str:
        """Build the route service URL for a coordinate pair."""
        coordinates = format_coordinates(origin, destination)
        return f"{self._base_url}/{OSRM_ROUTE_SERVICE}/{self._profile}/{coordinates}"

    async def _read_payload(self, response: aiohttp.ClientResponse, url: str) -> dict[str, Any]:
        """Decode the JSON body of a route response.

        OSRM reports routing failures such as NoRoute as JSON with a 400
        status, so any JSON object body is returned regardless of status.
        """
        try:
            data = await response.json(content_type=None)
        except (aiohttp.ContentTypeError, ValueError):
            body = await response.text()
            logger.warning(
                f"OSRM returned non-JSON status {response.status} for {url}: {body[:200]}"
            )
            raise RoutingFailedError(f"HTTP {response.status} with non-JSON body") from None

        if not isinstance(data, dict):
            raise RoutingFailedError(f"unexpected response shape from OSRM: {type(data).__name__}")
        if response.status != 200 and "code" not in data:
            raise RoutingFailedError(f"HTTP {response.status}")
        return data

    async def fetch_route(self, origin: Coordinate, destination: Coordinate) -> dict[str, Any]:
        """Request the single best route between two coordinates.

        Returns:
            Decoded OSRM response object.

        Raises:
            RoutingFailedError: On transport errors, timeouts or unreadable responses.
        """
        if self._session is None:
            raise RoutingFailedError("no HTTP session available for OSRM requests")

        url = self.route_url(origin, destination)
        await self._rate_limiter.acquire()
        log_api_request("GET", url, OSRM_ROUTE_PARAMS)

        started = time.monotonic()
        try:
            async with self._session.get(
                url, params=OSRM_ROUTE_PARAMS, headers=DEFAULT_HEADERS, timeout=self._timeout
            ) as response:
                log_api_response(url, response.status, time.monotonic() - started)
                return await self._read_payload(response, url)
        except asyncio.TimeoutError:
            logger.warning(f"OSRM request timed out for {url}")
            raise RoutingFailedError("request timed out") from None
        except aiohttp.ClientError as e:
            logger.warning(f"Error requesting OSRM route {url}: {e}")
            raise RoutingFailedError(str(e) or e.__class__.__name__) from e
