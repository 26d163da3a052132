"""Single-attempt station fetching against one mirror.

The fetcher is the failure boundary of a search: whatever goes wrong
with one mirror and one query is turned into a diagnostic string, and
the search moves on to the next attempt.
"""

import logging
from dataclasses import dataclass, field

from ondas.client import RadioBrowserProtocol
from ondas.exceptions import MirrorError
from ondas.models.radiobrowser import RawStation
from ondas.models.search import AttemptSpec
from ondas.models.station import StationRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FetchOutcome:
    """Result of one (mirror, attempt) fetch.

    Attributes:
        stations: Playable stations mapped from the response.
        error: Diagnostic string if the fetch failed, else None.
    """

    stations: list[StationRecord] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        """Whether the fetch succeeded (possibly with zero stations)."""
        return self.error is None


def format_error(mirror: str, attempt: AttemptSpec, reason: str) -> str:
    """Format a fetch failure as ``<mirror> :: <tag>/<country>/<codec> => <reason>``."""
    return f"{mirror} :: {attempt.label} => {reason}"


def to_station_record(raw: RawStation, bitrate_min: int = 0) -> StationRecord | None:
    """Map a raw directory entry to a StationRecord.

    Returns None for entries that cannot be played on the signage page:
    missing id, name or resolved stream URL, non-HTTPS streams, stations
    whose last check did not succeed (``lastcheckok`` must be exactly 1),
    and stations with a known bitrate below ``bitrate_min``. A bitrate of
    0 means "unknown" upstream and is kept.
    """
    if not raw.stationuuid or not raw.name or not raw.url_resolved:
        return None
    # HTTPS only: the page is served over HTTPS and would block mixed content
    if not raw.url_resolved.lower().startswith("https://"):
        return None
    if raw.lastcheckok != 1:
        return None
    if raw.bitrate and raw.bitrate < bitrate_min:
        return None

    return StationRecord(
        id=raw.stationuuid,
        name=raw.name,
        stream_url=raw.url_resolved,
        favicon=raw.favicon,
        homepage=raw.homepage,
        tags=raw.tag_list or None,
        country=raw.country,
        country_code=raw.countrycode,
        codec=raw.codec,
        bitrate=raw.bitrate,
    )


class MirrorFetcher:
    """Runs one attempt against one mirror without ever raising."""

    def __init__(self, client: RadioBrowserProtocol) -> None:
        self._client = client

    def fetch(self, mirror: str, attempt: AttemptSpec) -> FetchOutcome:
        """Fetch and map stations for a single attempt.

        Args:
            mirror: Mirror base URL.
            attempt: Query to run.

        Returns:
            FetchOutcome with mapped stations, or with an error diagnostic.
        """
        try:
            raw_stations = self._client.search_stations(mirror, attempt)
        except MirrorError as e:
            logger.warning("Fetch failed on %s (%s): %s", mirror, attempt.label, e)
            return FetchOutcome(error=format_error(mirror, attempt, e.message))
        except Exception as e:
            logger.exception("Unexpected error on %s (%s)", mirror, attempt.label)
            return FetchOutcome(
                error=format_error(mirror, attempt, f"unexpected error: {e}")
            )

        stations = [
            record
            for raw in raw_stations
            if (record := to_station_record(raw, attempt.bitrate_min)) is not None
        ]
        logger.debug(
            "Attempt %s on %s: %d raw, %d playable",
            attempt.label,
            mirror,
            len(raw_stations),
            len(stations),
        )
        return FetchOutcome(stations=stations)
