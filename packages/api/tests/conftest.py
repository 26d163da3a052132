"""Test fixtures and configuration for ondas-api tests.

This module provides shared fixtures organized into:
- Station fixtures: Builders for upstream directory data
- Client fixtures: A FastAPI TestClient wired to a fake radio directory
"""

from __future__ import annotations

from collections.abc import Callable, Generator
from typing import Any

import pytest
from fastapi.testclient import TestClient
from ondas import SearchConfig, StationFinder
from ondas.models.radiobrowser import RawStation
from ondas.models.search import AttemptSpec
from ondas_api.api.app import create_app
from ondas_api.api.dependencies import get_station_finder

TEST_MIRRORS = ("https://a.radio.test", "https://b.radio.test")


# =============================================================================
# Station Fixtures
# =============================================================================


def make_raw_stations(count: int, start: int = 1) -> list[RawStation]:
    """Build valid raw stations with sequential ids."""
    return [
        RawStation.model_validate(
            {
                "stationuuid": f"uuid-{i:04d}",
                "name": f"Station {i}",
                "url_resolved": f"https://stream.test/{i}",
                "countrycode": "BR",
                "codec": "MP3",
                "bitrate": 128,
                "lastcheckok": 1,
            }
        )
        for i in range(start, start + count)
    ]


class FakeRadioDirectory:
    """Radio directory client returning the same answer to every query.

    ``answer`` is either a station list or an exception to raise.
    """

    def __init__(self, answer: list[RawStation] | Exception) -> None:
        self.answer = answer
        self.calls: list[tuple[str, str]] = []

    def search_stations(self, mirror: str, attempt: AttemptSpec) -> list[RawStation]:
        self.calls.append((mirror, attempt.label))
        if isinstance(self.answer, Exception):
            raise self.answer
        return self.answer


# =============================================================================
# Client Fixtures
# =============================================================================


@pytest.fixture
def directory() -> FakeRadioDirectory:
    """Fake directory with plenty of stations for any query."""
    return FakeRadioDirectory(make_raw_stations(200))


@pytest.fixture
def client_for() -> Generator[Callable[[Any], TestClient], None, None]:
    """Factory for TestClients whose station finder uses the given directory."""
    opened: list[TestClient] = []

    def _create(directory: Any) -> TestClient:
        app = create_app()
        finder = StationFinder(directory, SearchConfig(mirrors=TEST_MIRRORS))
        app.dependency_overrides[get_station_finder] = lambda: finder
        client = TestClient(app)
        client.__enter__()
        opened.append(client)
        return client

    yield _create

    for client in opened:
        client.__exit__(None, None, None)


@pytest.fixture
def client(
    client_for: Callable[[Any], TestClient], directory: FakeRadioDirectory
) -> TestClient:
    """TestClient backed by the default fake directory."""
    return client_for(directory)
