"""Tests for crew_creation.intents."""

import pytest

from crew_creation.catalog import ColorPreset, ThemeStyle
from crew_creation.intents import CancelCreation, CreateOrganization, IntentEmitter, Theme
from crew_creation.ledger import BudgetLedger
from crew_creation.snapshot import WorldSnapshot
from crew_creation.wizard import WizardStateMachine
from helpers import VESSELS


def _intent() -> CreateOrganization:
    return CreateOrganization(
        name="Zonk",
        vessel_name="Pearl",
        location="mars",
        theme=Theme(ThemeStyle.STRIPED, (ColorPreset.GOLD, ColorPreset.TEAL, ColorPreset.IVORY)),
        selected_candidates=("bob", "ann"),
        vessel_class="Skiff",
        final_balance=300,
    )


class TestIntentValues:
    """Immutable outbound values."""

    def test_frozen(self) -> None:
        intent = _intent()
        with pytest.raises(AttributeError):
            intent.name = "Other"  # type: ignore[misc]

    def test_payload_is_plain_data(self) -> None:
        payload = _intent().to_payload()
        assert payload == {
            "name": "Zonk",
            "vessel_name": "Pearl",
            "location": "mars",
            "theme": {"style": "striped", "colors": ["gold", "teal", "ivory"]},
            "selected_candidates": ["bob", "ann"],
            "vessel_class": "Skiff",
            "final_balance": 300,
        }

    def test_cancel_payload_empty(self) -> None:
        assert CancelCreation().to_payload() == {}


class TestIntentEmitter:
    """Building intents from a wizard state."""

    def test_commit_without_location_raises(self, machine: WizardStateMachine) -> None:
        emitter = IntentEmitter(BudgetLedger(1000, VESSELS), [ThemeStyle.CLASSIC])
        with pytest.raises(ValueError):
            emitter.commit(machine.state)

    def test_commit_snapshots_state(
        self, machine: WizardStateMachine, world: WorldSnapshot
    ) -> None:
        machine.update(world)
        machine.state.org_name = "Zonk"
        machine.state.location_index = 1
        machine.state.selected_candidates = ("cid",)
        machine.state.theme_index = 1
        intent = machine.emitter.commit(machine.state)
        assert intent.location == "mars"
        assert intent.theme.style is machine.theme_styles[1]
        assert intent.final_balance == 1000 - 150 - 100

        machine.state.selected_candidates = ()
        assert intent.selected_candidates == ("cid",)

    def test_cancel_goes_to_sink(self) -> None:
        received = []
        emitter = IntentEmitter(BudgetLedger(0, VESSELS), [], sink=received.append)
        intent = emitter.cancel()
        assert received == [intent]
