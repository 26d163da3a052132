"""Models for parsing radio-browser.info responses.

These are internal models used at the mirror boundary. The upstream
directory is uncontrolled, so every field is optional and coerced
field-by-field: a wrong-typed value becomes None instead of failing the
whole station array.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

__all__ = ["RawStation"]


class RadioBrowserModel(BaseModel):
    """Base model for radio-browser responses."""

    model_config = ConfigDict(extra="ignore", frozen=True)


class RawStation(RadioBrowserModel):
    """Station object from /json/stations/search."""

    stationuuid: str | None = None
    name: str | None = None
    url_resolved: str | None = None
    favicon: str | None = None
    homepage: str | None = None
    tags: str | None = None  # comma separated
    country: str | None = None
    countrycode: str | None = None
    codec: str | None = None
    bitrate: int | None = None
    lastcheckok: int | None = None
    lastchecktime: str | None = None

    @field_validator(
        "stationuuid",
        "name",
        "url_resolved",
        "favicon",
        "homepage",
        "tags",
        "country",
        "countrycode",
        "codec",
        "lastchecktime",
        mode="before",
    )
    @classmethod
    def optional_string(cls, v: Any) -> str | None:
        """Trim strings; blank or non-string values become None."""
        if not isinstance(v, str):
            return None
        return v.strip() or None

    @field_validator("bitrate", "lastcheckok", mode="before")
    @classmethod
    def optional_int(cls, v: Any) -> int | None:
        """Accept ints, integral floats and numeric strings; else None.

        Booleans are not numbers here: ``lastcheckok`` must be exactly 1.
        """
        if isinstance(v, bool):
            return None
        if isinstance(v, int):
            return v
        if isinstance(v, float) and v.is_integer():
            return int(v)
        if isinstance(v, str):
            try:
                return int(v.strip())
            except ValueError:
                return None
        return None

    @property
    def tag_list(self) -> list[str]:
        """Upstream tags split into a list, blanks removed."""
        if not self.tags:
            return []
        return [t for tag in self.tags.split(",") if (t := tag.strip())]
