"""Test fixtures and configuration."""

from collections.abc import Callable
from typing import Any

import pytest
from ondas.config import SearchConfig
from ondas.exceptions import MirrorRequestError
from ondas.models.enums import ProfileId
from ondas.models.radiobrowser import RawStation
from ondas.models.search import AttemptSpec, SearchProfile, SearchRequest

MIRROR_A = "https://a.radio.test"
MIRROR_B = "https://b.radio.test"


def raw_station_dict(index: int, **overrides: Any) -> dict[str, Any]:
    """Build a valid radio-browser station object."""
    data: dict[str, Any] = {
        "stationuuid": f"uuid-{index:04d}",
        "name": f"Station {index}",
        "url": f"http://stream.test/{index}.m3u",
        "url_resolved": f"https://stream.test/{index}",
        "favicon": f"https://stream.test/{index}.png",
        "homepage": f"https://station{index}.test",
        "tags": "dance,pop",
        "country": "Brazil",
        "countrycode": "BR",
        "codec": "MP3",
        "bitrate": 128,
        "lastcheckok": 1,
        "lastchecktime": "2024-06-01 12:00:00",
        "votes": 1000 - index,
    }
    data.update(overrides)
    return data


@pytest.fixture
def make_raw_stations() -> Callable[..., list[RawStation]]:
    """Factory for lists of valid raw stations with sequential ids."""

    def _make(count: int, start: int = 1, **overrides: Any) -> list[RawStation]:
        return [
            RawStation.model_validate(raw_station_dict(i, **overrides))
            for i in range(start, start + count)
        ]

    return _make


@pytest.fixture
def sample_attempt() -> AttemptSpec:
    """Create a sample attempt."""
    return AttemptSpec(
        tag="dance", countrycode="BR", codec="MP3", bitrate_min=96, per_try_limit=60
    )


@pytest.fixture
def sample_profile() -> SearchProfile:
    """Create the small agency-style profile used in scenario tests."""
    return SearchProfile(
        id=ProfileId.AGENCY,
        label="Agency",
        tags=("dance", "pop"),
        country_priority=("BR", ""),
        bitrate_min=96,
        codecs=("MP3",),
        per_try_limit=60,
    )


@pytest.fixture
def sample_request(sample_profile: SearchProfile) -> SearchRequest:
    """Create a request for the sample profile."""
    return SearchRequest(profile=sample_profile, limit=15)


@pytest.fixture
def two_mirror_config() -> SearchConfig:
    """Create a config with two test mirrors."""
    return SearchConfig(mirrors=(MIRROR_A, MIRROR_B), timeout=1.0)


Response = list[RawStation] | Exception


class MockRadioBrowserClient:
    """Mock radio directory client for testing.

    Responses are keyed by ``(mirror, attempt.label)``. Unconfigured
    pairs return ``default`` (an empty list unless given). An exception
    value is raised instead of returned.
    """

    def __init__(
        self,
        responses: dict[tuple[str, str], Response] | None = None,
        default: Response | None = None,
    ) -> None:
        self._responses = responses or {}
        self._default: Response = default if default is not None else []
        self.search_calls: list[tuple[str, str]] = []
        self.closed = False

    def search_stations(self, mirror: str, attempt: AttemptSpec) -> list[RawStation]:
        """Mock search_stations."""
        self.search_calls.append((mirror, attempt.label))
        response = self._responses.get((mirror, attempt.label), self._default)
        if isinstance(response, Exception):
            raise response
        return response

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def mock_client_factory() -> Callable[..., MockRadioBrowserClient]:
    """Factory for mock clients."""
    return MockRadioBrowserClient


@pytest.fixture
def failing_client() -> MockRadioBrowserClient:
    """Client whose every request times out."""
    return MockRadioBrowserClient(
        default=MirrorRequestError("timeout after 9s", "any")
    )
