"""Shared world snapshot fixtures."""

import pytest

from crew_creation.snapshot import WorldSnapshot
from crew_creation.wizard import WizardStateMachine
from helpers import CHANNELS, VESSELS, candidate, make_snapshot


@pytest.fixture
def world() -> WorldSnapshot:
    """Two populated locations, one empty populated location and one unpopulated."""
    return make_snapshot(
        [("mars", 10), ("ceres", 5), ("io", 0), ("titan", 3)],
        [
            candidate("ann", "mars", 50, 200),
            candidate("bob", "mars", 80, 400),
            candidate("cid", "mars", 50, 150),
            candidate("dee", "mars", 90, 500, team="rivals"),
            candidate("eve", "ceres", 60, 900),
            candidate("fay", "io", 70, 100),
        ],
    )


@pytest.fixture
def machine() -> WizardStateMachine:
    return WizardStateMachine(
        starting_balance=1000,
        team_size=2,
        channels=CHANNELS,
        vessel_classes=VESSELS,
    )
