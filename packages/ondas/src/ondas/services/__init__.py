"""Business logic services for ondas.

Public API:
    StationFinder - Multi-mirror, multi-attempt station search

Building blocks (also importable for testing):
    plan_attempts - Expand a request into ordered queries
    MirrorFetcher - Run one query against one mirror, never raising
    StationCollector - Deduplicate stations in discovery order
"""

from ondas.services.collector import StationCollector
from ondas.services.fetcher import FetchOutcome, MirrorFetcher
from ondas.services.finder import StationFinder
from ondas.services.planner import plan_attempts

__all__ = [
    "FetchOutcome",
    "MirrorFetcher",
    "StationCollector",
    "StationFinder",
    "plan_attempts",
]
