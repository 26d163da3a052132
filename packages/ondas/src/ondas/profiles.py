"""Built-in search profiles and request resolution."""

import logging
import math
from collections.abc import Mapping
from types import MappingProxyType

from ondas.config import SearchConfig
from ondas.models.enums import ProfileId
from ondas.models.search import SearchProfile, SearchRequest

logger = logging.getLogger(__name__)

RADIO_PROFILES: Mapping[ProfileId, SearchProfile] = MappingProxyType(
    {
        ProfileId.AGENCY: SearchProfile(
            id=ProfileId.AGENCY,
            label="Agência (Pop / Dance / House)",
            tags=("dance", "electronic", "house", "pop", "hits", "top40", "edm"),
            # Brazil first, then global
            country_priority=("BR", ""),
            bitrate_min=96,
            codecs=("MP3", "AAC"),
            per_try_limit=60,
        ),
        ProfileId.FOCUS: SearchProfile(
            id=ProfileId.FOCUS,
            label="Focus (Lo-fi / Ambient)",
            tags=("lofi", "ambient", "chillout", "downtempo", "study"),
            country_priority=("", "BR"),
            bitrate_min=96,
            codecs=("MP3", "AAC"),
            per_try_limit=60,
        ),
        ProfileId.CHILL: SearchProfile(
            id=ProfileId.CHILL,
            label="Chill (Lounge / Deep / Chillout)",
            tags=("chillout", "lounge", "downtempo", "deep house", "smooth"),
            country_priority=("", "BR"),
            bitrate_min=96,
            codecs=("MP3", "AAC"),
            per_try_limit=60,
        ),
    }
)


def get_profile(profile_id: object = None) -> SearchProfile:
    """Look up a built-in profile.

    Unknown or missing identifiers fall back to the default profile.
    """
    return RADIO_PROFILES[ProfileId.parse(profile_id)]


def _parse_limit(value: object) -> int | float | None:
    """Parse a numeric limit; infinities are kept so they clamp, NaN is None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return None
    if isinstance(value, float) and not math.isnan(value):
        return value
    return None


def clamp_limit(value: object, config: SearchConfig | None = None) -> int:
    """Clamp a requested result count into the configured range.

    Missing or non-numeric input (including NaN) uses the default limit.
    Out-of-range numbers, infinities included, clamp to the nearest bound.
    Never raises.

    Args:
        value: Raw limit (int, float, numeric string, or anything else).
        config: Search configuration providing bounds and default.

    Returns:
        An integer within ``[config.limit_min, config.limit_max]``.
    """
    config = config or SearchConfig()
    parsed = _parse_limit(value)
    limit = config.default_limit if parsed is None else parsed
    return int(max(config.limit_min, min(config.limit_max, limit)))


def resolve_request(
    profile_id: object = None,
    tag: str | None = None,
    country: str | None = None,
    limit: object = None,
    config: SearchConfig | None = None,
) -> SearchRequest:
    """Resolve caller input into a concrete search request.

    A tag or country override replaces the profile's entire list for
    that dimension with a single value: the caller accepts narrower,
    override-only matching.

    Args:
        profile_id: Profile identifier; unknown values use the default.
        tag: Optional single tag replacing the profile's tag list.
        country: Optional country code replacing the country list.
        limit: Desired result count, clamped rather than rejected.
        config: Search configuration providing limit bounds.

    Returns:
        A fully resolved SearchRequest.
    """
    profile = get_profile(profile_id).with_overrides(tag=tag, country=country)
    request = SearchRequest(profile=profile, limit=clamp_limit(limit, config))
    logger.debug(
        "Resolved profile=%s tags=%s countries=%s limit=%d",
        profile.id,
        list(profile.tags),
        list(profile.country_priority),
        request.limit,
    )
    return request
