"""Read-only world snapshot consumed by the wizard: Pydantic models and YAML loader.

The wizard never mutates the world. It only enumerates populated locations
and unaffiliated candidates and resolves ids to display attributes.
"""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, model_validator

__all__ = ["Candidate", "Location", "SnapshotError", "WorldSnapshot", "load_snapshot"]


class SnapshotError(LookupError):
    """A referenced location or candidate id is absent from the snapshot (stale cache)."""


class Location(BaseModel):
    """A place candidates call home and a crew can be based at."""

    id: str
    name: str
    population: int = 0
    # Render ticks per rotation frame of the location preview
    rotation_period: int = Field(default=1, ge=1)
    description: str = ""


class Candidate(BaseModel):
    """A person who may be hired; unaffiliated when team_id is None."""

    id: str
    first_name: str
    last_name: str
    home_location_id: str
    rating: int = Field(ge=0)
    base_cost: int = Field(ge=0)
    team_id: str | None = None
    role: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def hire_cost(self, experience: float = 0.0) -> int:
        """Price to hire; grows with accumulated experience."""
        return round(self.base_cost * (1.0 + max(experience, 0.0)))


class WorldSnapshot(BaseModel):
    """Immutable view of the world at wizard start."""

    model_config = {"frozen": True}

    locations: list[Location] = Field(default_factory=list)
    candidates: list[Candidate] = Field(default_factory=list)

    @model_validator(mode="after")
    def _validate_unique_ids(self) -> "WorldSnapshot":
        for kind, ids in (
            ("location", [loc.id for loc in self.locations]),
            ("candidate", [c.id for c in self.candidates]),
        ):
            if len(set(ids)) != len(ids):
                raise ValueError(f"duplicate {kind} ids in snapshot")
        return self

    def populated_locations(self) -> list[Location]:
        return [loc for loc in self.locations if loc.population > 0]

    def unaffiliated_candidates(self) -> list[Candidate]:
        """Candidates without a team, in snapshot order."""
        return [c for c in self.candidates if c.team_id is None]

    def get_location(self, location_id: str) -> Location:
        for loc in self.locations:
            if loc.id == location_id:
                return loc
        raise SnapshotError(f"location {location_id!r} not in snapshot")

    def get_candidate(self, candidate_id: str) -> Candidate:
        for c in self.candidates:
            if c.id == candidate_id:
                return c
        raise SnapshotError(f"candidate {candidate_id!r} not in snapshot")


def load_snapshot(path: Path) -> WorldSnapshot:
    """Read and validate a world snapshot YAML. Raises on invalid YAML or validation error."""
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Snapshot must be a YAML object: {path}")
    return WorldSnapshot.model_validate(data)
