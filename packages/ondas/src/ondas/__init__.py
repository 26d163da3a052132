"""ondas - Find playable internet radio stations for signage screens.

This library searches the public radio-browser.info directory across
several interchangeable mirrors, trying a prioritized set of tags,
countries and codecs until enough unique, HTTPS-playable stations have
been found.

Designed for use as a library in applications (e.g., FastAPI) with
a CLI for debugging and development.

Examples:
    Search the default profile:
    ```python
    from ondas import create_finder

    with create_finder() as finder:
        result = finder.search("focus", limit=20)
    for station in result.stations:
        print(station.name, station.stream_url)
    ```

    Narrow a profile to a single tag:
    ```python
    result = finder.search("focus", tag="jazz")
    ```
"""

import httpx

from ondas.client import RadioBrowserClient, RadioBrowserProtocol
from ondas.config import DEFAULT_MIRRORS, SearchConfig
from ondas.exceptions import (
    ConfigurationError,
    MirrorError,
    MirrorRequestError,
    MirrorResponseError,
    OndasError,
)
from ondas.models import (
    AttemptSpec,
    ProfileId,
    SearchProfile,
    SearchRequest,
    SearchResult,
    StationRecord,
)
from ondas.profiles import RADIO_PROFILES, clamp_limit, get_profile, resolve_request
from ondas.services import StationFinder, plan_attempts


def create_finder(
    config: SearchConfig | None = None,
    http_client: httpx.Client | None = None,
) -> StationFinder:
    """Create a configured station finder.

    This is the recommended way to create a finder for library usage.
    It handles client instantiation internally.

    Args:
        config: Optional search configuration. Uses defaults if not provided.
        http_client: Optional httpx client (e.g. with a mock transport).

    Returns:
        A configured StationFinder. Use it as a context manager, or call
        ``close()`` when done, to release the HTTP connection pool.

    Examples:
        With custom mirrors and a shorter timeout:
        ```python
        config = SearchConfig(mirrors=("https://de1.api.radio-browser.info",), timeout=5)
        finder = create_finder(config)
        ```
    """
    config = config or SearchConfig()
    client = RadioBrowserClient(config=config, http_client=http_client)
    return StationFinder(client, config)


__all__ = [
    "DEFAULT_MIRRORS",
    "RADIO_PROFILES",
    "AttemptSpec",
    "ConfigurationError",
    "MirrorError",
    "MirrorRequestError",
    "MirrorResponseError",
    "OndasError",
    "ProfileId",
    "RadioBrowserClient",
    "RadioBrowserProtocol",
    "SearchConfig",
    "SearchProfile",
    "SearchRequest",
    "SearchResult",
    "StationFinder",
    "StationRecord",
    "clamp_limit",
    "create_finder",
    "get_profile",
    "plan_attempts",
    "resolve_request",
]
