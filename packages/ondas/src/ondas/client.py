"""radio-browser.info API client wrapper."""

import json
import logging
import time
from typing import Any, Protocol

import httpx

from ondas.config import SearchConfig
from ondas.exceptions import MirrorRequestError, MirrorResponseError
from ondas.models.radiobrowser import RawStation
from ondas.models.search import AttemptSpec

logger = logging.getLogger(__name__)

SEARCH_ENDPOINT = "/json/stations/search"

# Sent with every search: only stations whose last check succeeded,
# HTTPS streams only, most voted first.
_FIXED_PARAMS: dict[str, str] = {
    "hidebroken": "true",
    "is_https": "true",
    "order": "votes",
    "reverse": "true",
}


class RadioBrowserProtocol(Protocol):
    """Protocol for radio directory clients.

    This protocol enables dependency injection and testing.
    Implement this protocol to create mock clients for testing.
    """

    def search_stations(self, mirror: str, attempt: AttemptSpec) -> list[RawStation]:
        """Run one station search against one mirror."""
        ...


def build_search_params(attempt: AttemptSpec) -> dict[str, str]:
    """Build query parameters for a station search.

    An empty country code means "no country filter" and is omitted.
    """
    params = {"tag": attempt.tag}
    if attempt.countrycode:
        params["countrycode"] = attempt.countrycode
    params["codec"] = attempt.codec
    params["bitrateMin"] = str(attempt.bitrate_min)
    params.update(_FIXED_PARAMS)
    params["limit"] = str(attempt.per_try_limit)
    return params


class RadioBrowserClient:
    """Production radio-browser client.

    Wraps an httpx client with consistent error handling and response
    parsing. Implements RadioBrowserProtocol for type safety.
    """

    def __init__(
        self,
        config: SearchConfig | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Optional search configuration. Uses defaults if not provided.
            http_client: Optional httpx client. Creates one if not provided;
                a provided client is not closed by this wrapper.
        """
        self._config = config or SearchConfig()
        self._owns_http_client = http_client is None
        self._headers = {
            "User-Agent": self._config.user_agent,
            "Accept": "application/json",
        }
        self._http = http_client or httpx.Client(
            timeout=self._config.timeout, follow_redirects=True
        )

    def close(self) -> None:
        """Close the HTTP client if this wrapper created it."""
        if self._owns_http_client:
            self._http.close()

    def __enter__(self) -> "RadioBrowserClient":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def search_stations(self, mirror: str, attempt: AttemptSpec) -> list[RawStation]:
        """Search stations on a single mirror.

        Args:
            mirror: Mirror base URL (e.g. https://de1.api.radio-browser.info).
            attempt: Query to run.

        Returns:
            Parsed stations. Array entries that are not objects are skipped.

        Raises:
            MirrorRequestError: On timeout, network error or non-2xx status.
            MirrorResponseError: If the body is not a JSON array.
        """
        url = mirror.rstrip("/") + SEARCH_ENDPOINT
        params = build_search_params(attempt)
        logger.debug("GET %s %s", url, params)

        body = self._fetch_body(url, params, mirror)

        try:
            payload: Any = json.loads(body)
        except ValueError as e:
            raise MirrorResponseError("invalid JSON body", mirror) from e

        if not isinstance(payload, list):
            raise MirrorResponseError(
                f"expected JSON array, got {type(payload).__name__}", mirror
            )

        stations = [
            RawStation.model_validate(entry)
            for entry in payload
            if isinstance(entry, dict)
        ]

        logger.debug("Mirror %s returned %d stations", mirror, len(stations))
        return stations

    def _fetch_body(self, url: str, params: dict[str, str], mirror: str) -> bytes:
        """Download a response body within the configured total deadline.

        httpx applies its timeout to each network operation, so a mirror
        trickling bytes would never trip it. The body is streamed and the
        request abandoned once ``config.timeout`` has elapsed overall.
        """
        timeout = self._config.timeout
        deadline = time.monotonic() + timeout
        body = bytearray()
        try:
            with self._http.stream(
                "GET", url, params=params, headers=self._headers, timeout=timeout
            ) as response:
                response.raise_for_status()
                for chunk in response.iter_bytes():
                    if time.monotonic() > deadline:
                        raise MirrorRequestError(f"timeout after {timeout:g}s", mirror)
                    body.extend(chunk)
        except httpx.TimeoutException as e:
            raise MirrorRequestError(f"timeout after {timeout:g}s", mirror) from e
        except httpx.HTTPStatusError as e:
            raise MirrorRequestError(
                f"HTTP {e.response.status_code}", mirror
            ) from e
        except httpx.HTTPError as e:
            raise MirrorRequestError(str(e) or type(e).__name__, mirror) from e
        return bytes(body)
