"""Normalized station model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class StationRecord(BaseModel):
    """A playable station, normalized from the radio directory.

    Only ``id``, ``name`` and ``stream_url`` are guaranteed. Optional
    metadata is present only when the upstream supplied it. Serializes
    with camelCase keys (``streamUrl``) for the signage frontend.

    Attributes:
        id: Upstream station UUID, used as the dedup key.
        name: Display name.
        stream_url: Resolved HTTPS stream URL.
        favicon: Station logo URL.
        homepage: Station website.
        tags: Genre tags as listed by the directory.
        country: Country name.
        country_code: ISO 3166-1 alpha-2 code.
        codec: Stream codec (e.g. MP3, AAC).
        bitrate: Stream bitrate in kbps.
    """

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    id: str
    name: str
    stream_url: str
    favicon: str | None = None
    homepage: str | None = None
    tags: list[str] | None = None
    country: str | None = None
    country_code: str | None = None
    codec: str | None = None
    bitrate: int | None = None

    @field_validator("name", "stream_url")
    @classmethod
    def non_empty_string(cls, v: str) -> str:
        """Validate that name and stream URL are non-empty strings."""
        if not v or not v.strip():
            raise ValueError("must not be empty")
        return v
