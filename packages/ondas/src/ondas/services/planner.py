"""Attempt planning for station searches."""

from ondas.models.search import AttemptSpec, SearchRequest


def plan_attempts(request: SearchRequest) -> list[AttemptSpec]:
    """Expand a search request into the ordered list of queries to run.

    Order is country (outer), then tag, then codec (inner), so the most
    preferred country is exhausted across every tag before the next one
    is tried. The same request always yields the same plan.

    Args:
        request: Resolved search request.

    Returns:
        ``len(countries) * len(tags) * len(codecs)`` attempts in priority order.
    """
    profile = request.profile
    return [
        AttemptSpec(
            tag=tag,
            countrycode=country,
            codec=codec,
            bitrate_min=profile.bitrate_min,
            per_try_limit=profile.per_try_limit,
        )
        for country in profile.country_priority
        for tag in profile.tags
        for codec in profile.codecs
    ]
