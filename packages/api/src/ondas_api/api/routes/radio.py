"""Radio station API endpoints.

Serves the station list the signage music dock plays from. Searches hit
public mirrors sequentially and may take several seconds, so the search
route is a plain ``def`` and runs in FastAPI's threadpool.
"""

from fastapi import APIRouter, Query, Response, status
from ondas import RADIO_PROFILES, SearchResult

from ondas_api.api.dependencies import StationFinderDep
from ondas_api.schemas.radio import ProfilesResponse

router = APIRouter(prefix="/radio", tags=["radio"])

_NO_STORE = "no-store, max-age=0"


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    response_model_exclude_none=True,
)
def search_stations(
    finder: StationFinderDep,
    response: Response,
    profile: str | None = Query(
        None, description="Profile id (agency, focus, chill); unknown uses agency"
    ),
    tag: str | None = Query(None, description="Single tag replacing the profile's"),
    country: str | None = Query(
        None, description="Single country code replacing the profile's"
    ),
    limit: str | None = Query(
        None, description="Number of stations; clamped to 10-120"
    ),
) -> SearchResult:
    """Search playable stations for a profile.

    Always answers 200: an empty station list means nothing playable was
    found, whatever the reason. ``errors`` carries capped diagnostics.
    """
    response.headers["Cache-Control"] = _NO_STORE
    return finder.search(profile, tag=tag, country=country, limit=limit)


@router.get("/profiles", status_code=status.HTTP_200_OK)
async def list_profiles() -> ProfilesResponse:
    """List the built-in search profiles."""
    return ProfilesResponse(profiles=list(RADIO_PROFILES.values()))
