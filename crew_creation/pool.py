"""Per-location pool of hireable candidates, built lazily from the first snapshot seen."""

import logging
from typing import NamedTuple

from crew_creation.snapshot import SnapshotError, WorldSnapshot

logger = logging.getLogger(__name__)

__all__ = ["CandidatePool", "PoolEntry"]


class PoolEntry(NamedTuple):
    candidate_id: str
    hire_cost: int


class CandidatePool:
    """Locations with population and their candidate buckets, best rated first.

    The pool is a snapshot: hire costs are evaluated once at build time with
    zero experience and never refreshed for the rest of the wizard session.
    """

    def __init__(self) -> None:
        self.location_ids: list[str] = []
        self.buckets: dict[str, list[PoolEntry]] = {}

    @property
    def is_built(self) -> bool:
        return bool(self.location_ids)

    def ensure_built(self, snapshot: WorldSnapshot) -> bool:
        """Build from snapshot if the location list is empty. Returns True when built by this call.

        Checked on every update; a snapshot without populated locations leaves
        the pool empty so a later call can retry.
        """
        if self.location_ids:
            return False

        location_ids = sorted(loc.id for loc in snapshot.populated_locations())
        buckets: dict[str, list[PoolEntry]] = {loc_id: [] for loc_id in location_ids}
        ratings: dict[str, int] = {}
        for candidate in snapshot.unaffiliated_candidates():
            buckets.setdefault(candidate.home_location_id, []).append(
                PoolEntry(candidate.id, candidate.hire_cost(0.0))
            )
            ratings[candidate.id] = candidate.rating
        for bucket in buckets.values():
            # list.sort is stable: equal ratings keep snapshot order
            bucket.sort(key=lambda entry: ratings[entry.candidate_id], reverse=True)

        self.buckets = buckets
        self.location_ids = location_ids
        if location_ids:
            logger.info(
                "Candidate pool built: %d locations, %d candidates",
                len(location_ids),
                sum(len(b) for b in buckets.values()),
            )
        else:
            logger.debug("Snapshot has no populated locations; pool left empty")
        return bool(location_ids)

    def bucket(self, location_id: str) -> list[PoolEntry]:
        try:
            return self.buckets[location_id]
        except KeyError:
            raise SnapshotError(f"no candidate bucket for location {location_id!r}") from None

    def location_at(self, index: int) -> str | None:
        if 0 <= index < len(self.location_ids):
            return self.location_ids[index]
        return None
