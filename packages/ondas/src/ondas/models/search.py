"""Search profile, request and result models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from ondas.models.enums import ProfileId
from ondas.models.station import StationRecord


class SearchModel(BaseModel):
    """Base model for search value objects (immutable, camelCase JSON)."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )


class SearchProfile(SearchModel):
    """Named preset describing the stations a screen should play.

    Every sequence is in priority order and tried first to last. An empty
    string in ``country_priority`` means "no country filter"; the list
    itself must never be empty.

    Attributes:
        id: Profile identifier.
        label: Human-readable display name.
        tags: Genre tags.
        country_priority: ISO country codes ("" = unfiltered).
        bitrate_min: Minimum acceptable bitrate in kbps.
        codecs: Codec names.
        per_try_limit: Max results requested per individual query.
    """

    id: ProfileId
    label: str
    tags: tuple[str, ...]
    country_priority: tuple[str, ...]
    bitrate_min: int = Field(default=0, ge=0)
    codecs: tuple[str, ...]
    per_try_limit: int = Field(default=60, ge=1)

    @field_validator("tags", "codecs")
    @classmethod
    def non_empty_entries(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Validate that the list has entries and none of them are blank."""
        if not v:
            raise ValueError("must have at least one entry")
        if not all(item.strip() for item in v):
            raise ValueError("must not contain blank entries")
        return v

    @field_validator("country_priority")
    @classmethod
    def non_empty_countries(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Validate the country list; use [""] to search unfiltered."""
        if not v:
            raise ValueError('must have at least one entry (use [""] for any)')
        return tuple(code.strip().upper() for code in v)

    def with_overrides(
        self, tag: str | None = None, country: str | None = None
    ) -> SearchProfile:
        """Return a copy narrowed to single-value overrides.

        An override replaces the whole list for its dimension, so the
        profile's own fallbacks for that dimension are no longer tried.
        Blank overrides are ignored.
        """
        update: dict[str, tuple[str, ...]] = {}
        if tag and tag.strip():
            update["tags"] = (tag.strip(),)
        if country is not None and country.strip():
            update["country_priority"] = (country.strip().upper(),)
        return self.model_copy(update=update) if update else self


class SearchRequest(SearchModel):
    """A resolved search invocation.

    Attributes:
        profile: Profile with any overrides already applied.
        limit: Desired total number of unique stations (already clamped).
    """

    profile: SearchProfile
    limit: int = Field(ge=1)


class AttemptSpec(SearchModel):
    """One concrete query against the station search endpoint."""

    tag: str
    countrycode: str
    codec: str
    bitrate_min: int
    per_try_limit: int

    @property
    def label(self) -> str:
        """Short ``tag/country/codec`` form used in diagnostics."""
        return f"{self.tag}/{self.countrycode}/{self.codec}"


class SearchResult(SearchModel):
    """Outcome of a station search.

    An empty ``stations`` list is a valid, successful result: callers
    render "no stations" without needing to know why. ``errors`` holds
    capped diagnostics for operational debugging.

    Attributes:
        profile_id: Profile that was searched.
        label: Profile display name.
        count: Number of stations returned.
        stations: Unique stations in discovery order.
        errors: Diagnostic strings for failed fetches.
        attempts: Number of fetches actually issued.
    """

    profile_id: ProfileId
    label: str
    count: int = 0
    stations: list[StationRecord] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)
    attempts: int = 0
