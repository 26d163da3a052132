"""Tests for single-attempt fetching and station mapping."""

from collections.abc import Callable
from typing import Any

import pytest
from ondas.exceptions import MirrorRequestError, MirrorResponseError
from ondas.models.radiobrowser import RawStation
from ondas.models.search import AttemptSpec
from ondas.services.fetcher import MirrorFetcher, format_error, to_station_record

MIRROR = "https://de1.api.radio-browser.info"


def _raw(**overrides: Any) -> RawStation:
    data: dict[str, Any] = {
        "stationuuid": "uuid-1",
        "name": "Rádio Teste",
        "url_resolved": "https://stream.test/live",
        "favicon": "https://stream.test/logo.png",
        "homepage": "https://radio.test",
        "tags": "dance, pop,,house ",
        "country": "Brazil",
        "countrycode": "BR",
        "codec": "MP3",
        "bitrate": 128,
        "lastcheckok": 1,
    }
    data.update(overrides)
    return RawStation.model_validate(data)


class TestToStationRecord:
    """Tests for mapping raw directory entries."""

    def test_maps_all_fields(self) -> None:
        record = to_station_record(_raw(), bitrate_min=96)
        assert record is not None
        assert record.id == "uuid-1"
        assert record.name == "Rádio Teste"
        assert record.stream_url == "https://stream.test/live"
        assert record.favicon == "https://stream.test/logo.png"
        assert record.homepage == "https://radio.test"
        assert record.tags == ["dance", "pop", "house"]
        assert record.country == "Brazil"
        assert record.country_code == "BR"
        assert record.codec == "MP3"
        assert record.bitrate == 128

    def test_optional_fields_absent_when_missing(self) -> None:
        raw = RawStation.model_validate(
            {
                "stationuuid": "x",
                "name": "Bare",
                "url_resolved": "https://stream.test/bare",
                "lastcheckok": 1,
            }
        )
        record = to_station_record(raw)
        assert record is not None
        dumped = record.model_dump(by_alias=True, exclude_none=True)
        assert dumped == {
            "id": "x",
            "name": "Bare",
            "streamUrl": "https://stream.test/bare",
        }

    @pytest.mark.parametrize(
        "overrides",
        [
            {"url_resolved": None},
            {"url_resolved": ""},
            {"url_resolved": "   "},
            {"stationuuid": None},
            {"name": ""},
        ],
        ids=["no_stream", "empty_stream", "blank_stream", "no_id", "no_name"],
    )
    def test_drops_incomplete_entries(self, overrides: dict[str, Any]) -> None:
        assert to_station_record(_raw(**overrides)) is None

    def test_drops_plain_http_streams(self) -> None:
        assert to_station_record(_raw(url_resolved="http://stream.test/live")) is None

    @pytest.mark.parametrize("lastcheckok", [0, None, 2, "0", "yes", True])
    def test_drops_unless_last_check_ok_is_one(self, lastcheckok: object) -> None:
        assert to_station_record(_raw(lastcheckok=lastcheckok)) is None

    @pytest.mark.parametrize("lastcheckok", [1, "1", 1.0])
    def test_accepts_last_check_ok(self, lastcheckok: object) -> None:
        assert to_station_record(_raw(lastcheckok=lastcheckok)) is not None

    def test_drops_known_bitrate_below_floor(self) -> None:
        assert to_station_record(_raw(bitrate=64), bitrate_min=96) is None

    @pytest.mark.parametrize("bitrate", [0, None, 96, 320])
    def test_keeps_unknown_or_sufficient_bitrate(self, bitrate: int | None) -> None:
        assert to_station_record(_raw(bitrate=bitrate), bitrate_min=96) is not None

    def test_wrong_typed_fields_become_none(self) -> None:
        record = to_station_record(_raw(favicon=42, bitrate="fast", tags=["x"]))
        assert record is not None
        assert record.favicon is None
        assert record.bitrate is None
        assert record.tags is None


class TestFormatError:
    def test_format(self, sample_attempt: AttemptSpec) -> None:
        assert (
            format_error(MIRROR, sample_attempt, "HTTP 503")
            == "https://de1.api.radio-browser.info :: dance/BR/MP3 => HTTP 503"
        )

    def test_empty_country_renders_empty(self) -> None:
        attempt = AttemptSpec(
            tag="pop", countrycode="", codec="AAC", bitrate_min=0, per_try_limit=5
        )
        assert format_error(MIRROR, attempt, "x").endswith(":: pop//AAC => x")


class TestMirrorFetcher:
    """Tests for MirrorFetcher."""

    def test_returns_mapped_stations(
        self,
        mock_client_factory: Callable[..., Any],
        make_raw_stations: Callable[..., list[RawStation]],
        sample_attempt: AttemptSpec,
    ) -> None:
        raws = make_raw_stations(3) + make_raw_stations(1, start=9, lastcheckok=0)
        client = mock_client_factory(responses={(MIRROR, "dance/BR/MP3"): raws})

        outcome = MirrorFetcher(client).fetch(MIRROR, sample_attempt)

        assert outcome.ok
        assert outcome.error is None
        assert [s.id for s in outcome.stations] == ["uuid-0001", "uuid-0002", "uuid-0003"]
        assert client.search_calls == [(MIRROR, "dance/BR/MP3")]

    def test_empty_response_is_success(
        self, mock_client_factory: Callable[..., Any], sample_attempt: AttemptSpec
    ) -> None:
        outcome = MirrorFetcher(mock_client_factory()).fetch(MIRROR, sample_attempt)
        assert outcome.ok
        assert outcome.stations == []

    @pytest.mark.parametrize(
        ("error", "reason"),
        [
            (MirrorRequestError("timeout after 9s", MIRROR), "timeout after 9s"),
            (MirrorRequestError("HTTP 502", MIRROR), "HTTP 502"),
            (MirrorResponseError("invalid JSON body", MIRROR), "invalid JSON body"),
        ],
        ids=["timeout", "http_error", "bad_json"],
    )
    def test_mirror_errors_become_diagnostics(
        self,
        mock_client_factory: Callable[..., Any],
        sample_attempt: AttemptSpec,
        error: Exception,
        reason: str,
    ) -> None:
        client = mock_client_factory(default=error)
        outcome = MirrorFetcher(client).fetch(MIRROR, sample_attempt)
        assert not outcome.ok
        assert outcome.stations == []
        assert outcome.error == f"{MIRROR} :: dance/BR/MP3 => {reason}"

    def test_unexpected_errors_do_not_escape(
        self, mock_client_factory: Callable[..., Any], sample_attempt: AttemptSpec
    ) -> None:
        client = mock_client_factory(default=RuntimeError("boom"))
        outcome = MirrorFetcher(client).fetch(MIRROR, sample_attempt)
        assert outcome.error == f"{MIRROR} :: dance/BR/MP3 => unexpected error: boom"
