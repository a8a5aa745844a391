"""Builders for world snapshots and wizard catalogs used across tests."""

from typing import Any

from crew_creation.catalog import ColorPreset, VesselClass
from crew_creation.snapshot import WorldSnapshot

CHANNELS = (ColorPreset.CRIMSON, ColorPreset.GOLD, ColorPreset.TEAL)

VESSELS = [
    VesselClass("Skiff", 100, 1200.0, 6, 0.0025, 60),
    VesselClass("Galleon", 300, 1000.0, 10, 0.005, 140),
]


def candidate(
    cid: str, location: str, rating: int, cost: int, team: str | None = None
) -> dict[str, Any]:
    return {
        "id": cid,
        "first_name": cid.title(),
        "last_name": "Test",
        "home_location_id": location,
        "rating": rating,
        "base_cost": cost,
        "team_id": team,
    }


def make_snapshot(
    locations: list[tuple[str, int]], candidates: list[dict[str, Any]]
) -> WorldSnapshot:
    return WorldSnapshot.model_validate(
        {
            "locations": [
                {"id": lid, "name": lid.title(), "population": pop, "rotation_period": 2}
                for lid, pop in locations
            ],
            "candidates": candidates,
        }
    )
