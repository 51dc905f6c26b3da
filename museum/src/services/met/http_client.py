"""Single-attempt JSON GET against an upstream HTTP API."""

import logging
from typing import Any

import requests

from museum.src.constants.met import REQUEST_TIMEOUT
from museum.src.services.met.errors import ParseError, TransportError

logger = logging.getLogger(__name__)


def fetch_json(
    url: str,
    http_session: requests.Session,
    params: dict[str, Any] | None = None,
    timeout: float = REQUEST_TIMEOUT,
) -> Any:
    """Issue one GET and parse the full response body as JSON.

    Args:
        url: Absolute URL to fetch
        http_session: Session used for the request
        params: Optional query parameters
        timeout: Socket-level timeout handed to requests

    Returns:
        The decoded JSON value

    Raises:
        TransportError: Connection failed, was reset, or the status was not 2xx
        ParseError: The body is not valid JSON
    """
    try:
        response = http_session.get(url, params=params, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        raise TransportError(f"GET {url} failed: {e}") from e

    try:
        return response.json()
    except ValueError as e:
        raise ParseError(f"GET {url} returned invalid JSON: {e}") from e
