"""Station search orchestration across mirrors and attempts."""

import logging

from ondas.client import RadioBrowserProtocol
from ondas.config import SearchConfig
from ondas.exceptions import ConfigurationError
from ondas.models.search import SearchRequest, SearchResult
from ondas.profiles import resolve_request
from ondas.services.collector import StationCollector
from ondas.services.fetcher import MirrorFetcher
from ondas.services.planner import plan_attempts

logger = logging.getLogger(__name__)


class StationFinder:
    """Finds stations for a profile across several interchangeable mirrors.

    Attempts run strictly sequentially, mirror-major: every planned
    attempt is tried on the first mirror before the second mirror is
    used. The search stops as soon as enough unique stations have been
    collected. Fetch failures are recorded as diagnostics and never
    abort the search.

    The finder holds no per-search state, so one instance can serve
    concurrent searches.
    """

    def __init__(
        self,
        client: RadioBrowserProtocol,
        config: SearchConfig | None = None,
    ) -> None:
        """Initialize the finder.

        Args:
            client: Radio directory client (use a mock for testing).
            config: Optional search configuration. Uses defaults if not provided.

        Raises:
            ConfigurationError: If the configuration lists no mirrors.
        """
        self._config = config or SearchConfig()
        if not self._config.mirrors:
            raise ConfigurationError("At least one mirror is required")
        self._client = client
        self._fetcher = MirrorFetcher(client)

    @property
    def config(self) -> SearchConfig:
        return self._config

    def close(self) -> None:
        """Close the underlying client if it supports closing."""
        close = getattr(self._client, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> "StationFinder":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def search(
        self,
        profile_id: object = None,
        tag: str | None = None,
        country: str | None = None,
        limit: object = None,
    ) -> SearchResult:
        """Search stations for a profile.

        Args:
            profile_id: Profile identifier; unknown values use the default.
            tag: Optional tag replacing the profile's tag list.
            country: Optional country code replacing the country list.
            limit: Desired number of stations, clamped to the configured range.

        Returns:
            SearchResult, possibly with no stations. Never raises for
            upstream failures.
        """
        request = resolve_request(
            profile_id, tag=tag, country=country, limit=limit, config=self._config
        )
        return self.run(request)

    def run(self, request: SearchRequest) -> SearchResult:
        """Execute an already resolved search request."""
        attempts = plan_attempts(request)
        collector = StationCollector(request.limit)
        errors: list[str] = []
        executed = 0

        logger.debug(
            "Searching %s: %d attempts x %d mirrors, limit=%d",
            request.profile.id,
            len(attempts),
            len(self._config.mirrors),
            request.limit,
        )

        for mirror in self._config.mirrors:
            for attempt in attempts:
                outcome = self._fetcher.fetch(mirror, attempt)
                executed += 1
                if outcome.error is not None:
                    errors.append(outcome.error)
                    continue
                collector.add(outcome.stations)
                if collector.is_full:
                    break
            if collector.is_full:
                break

        stations = collector.stations()
        logger.info(
            "Profile %s: %d stations after %d attempts (%d failed)",
            request.profile.id,
            len(stations),
            executed,
            len(errors),
        )

        return SearchResult(
            profile_id=request.profile.id,
            label=request.profile.label,
            count=len(stations),
            stations=stations,
            errors=errors[: self._config.max_errors],
            attempts=executed,
        )
