"""Radio API schemas."""

from ondas import SearchProfile
from pydantic import BaseModel, Field


class ProfilesResponse(BaseModel):
    """Response listing the built-in search profiles."""

    profiles: list[SearchProfile] = Field(default_factory=list)
