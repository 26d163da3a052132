"""Data models for ondas.

Public API:
    SearchProfile - Named station search preset
    SearchRequest - Resolved search invocation
    AttemptSpec - One concrete query against a mirror
    SearchResult - Deduplicated stations plus diagnostics
    StationRecord - Normalized station
    ProfileId - Built-in profile identifiers

Internal (not exported):
    radiobrowser.py - Models for parsing radio-browser responses
"""

from ondas.models.enums import ProfileId
from ondas.models.search import (
    AttemptSpec,
    SearchProfile,
    SearchRequest,
    SearchResult,
)
from ondas.models.station import StationRecord

__all__ = [
    "AttemptSpec",
    "ProfileId",
    "SearchProfile",
    "SearchRequest",
    "SearchResult",
    "StationRecord",
]
