"""Opt-in logging of outgoing routing requests, enabled with MPF_LOG_REQUESTS=true."""

import logging
import os
from typing import Any
from urllib.parse import urlencode

logger = logging.getLogger(__name__)

LOG_REQUESTS_ENV = "MPF_LOG_REQUESTS"


def should_log_requests() -> bool:
    """Check whether request logging is enabled via the environment."""
    return os.getenv(LOG_REQUESTS_ENV, "").lower() == "true"


def build_request_url(url: str, params: dict[str, Any] | None) -> str:
    """Append sorted query parameters to a URL."""
    if not params:
        return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{urlencode(sorted(params.items()))}"


def log_api_request(method: str, url: str, params: dict[str, Any] | None = None) -> None:
    """Log an outgoing request if request logging is enabled."""
    if not should_log_requests():
        return
    logger.info(f"API request: {method} {build_request_url(url, params)}")


def log_api_response(url: str, status: int, elapsed_seconds: float) -> None:
    """Log the outcome of a request if request logging is enabled."""
    if not should_log_requests():
        return
    logger.info(f"API response: {status} for {url} in {elapsed_seconds * 1000:.0f}ms")
