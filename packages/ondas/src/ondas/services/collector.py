"""Station accumulation and deduplication."""

from collections.abc import Iterable

from ondas.models.station import StationRecord


class StationCollector:
    """Accumulates stations across fetches, keeping the first of each id.

    One collector belongs to exactly one search call. Records without an
    id are dropped silently.
    """

    def __init__(self, limit: int) -> None:
        """Initialize an empty collector.

        Args:
            limit: Number of unique stations after which the search is done.
        """
        self.limit = limit
        self._seen: set[str] = set()
        self._stations: list[StationRecord] = []

    def add(self, records: Iterable[StationRecord]) -> int:
        """Add records in order, skipping ids already seen.

        Returns:
            Number of records newly accepted.
        """
        added = 0
        for record in records:
            if not record.id or record.id in self._seen:
                continue
            self._seen.add(record.id)
            self._stations.append(record)
            added += 1
        return added

    @property
    def count(self) -> int:
        """Number of unique stations collected so far."""
        return len(self._stations)

    @property
    def is_full(self) -> bool:
        """Whether enough unique stations have been found to stop searching."""
        return self.count >= self.limit

    def stations(self) -> list[StationRecord]:
        """Collected stations in discovery order, truncated to the limit."""
        return self._stations[: self.limit]
