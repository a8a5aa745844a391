"""Tests for crew_creation.ledger."""

from crew_creation.catalog import ColorPreset
from crew_creation.ledger import BudgetLedger
from crew_creation.snapshot import WorldSnapshot
from crew_creation.wizard import WizardStateMachine
from helpers import CHANNELS, VESSELS


def _ready(machine: WizardStateMachine, world: WorldSnapshot) -> WizardStateMachine:
    machine.update(world)
    return machine


class TestRemainingBalance:
    """Balance derived from location roster and vessel class only."""

    def test_vessel_cost_only(self, machine: WizardStateMachine, world: WorldSnapshot) -> None:
        _ready(machine, world)
        assert machine.remaining_balance() == 1000 - 100

    def test_selected_candidates_at_current_location(
        self, machine: WizardStateMachine, world: WorldSnapshot
    ) -> None:
        _ready(machine, world)
        machine.state.location_index = 1  # mars
        machine.state.selected_candidates = ("bob", "cid")
        assert machine.remaining_balance() == 1000 - 400 - 150 - 100

    def test_selection_from_other_location_ignored(
        self, machine: WizardStateMachine, world: WorldSnapshot
    ) -> None:
        _ready(machine, world)
        machine.state.location_index = 1  # mars
        machine.state.selected_candidates = ("eve",)
        assert machine.remaining_balance() == 900

    def test_vessel_class_changes_cost(
        self, machine: WizardStateMachine, world: WorldSnapshot
    ) -> None:
        _ready(machine, world)
        machine.state.vessel_index = 1
        assert machine.remaining_balance() == 700

    def test_may_go_negative(self, machine: WizardStateMachine, world: WorldSnapshot) -> None:
        _ready(machine, world)
        machine.state.selected_candidates = ("eve",)
        machine.state.vessel_index = 1
        assert machine.remaining_balance() == 1000 - 900 - 300

    def test_names_and_theme_do_not_matter(
        self, machine: WizardStateMachine, world: WorldSnapshot
    ) -> None:
        _ready(machine, world)
        machine.state.location_index = 1
        machine.state.selected_candidates = ("ann",)
        before = machine.remaining_balance()
        machine.state.org_name = "Zonk"
        machine.state.vessel_name = "Black Pearl"
        machine.state.theme_index = 3
        machine.cycle_channel(0)
        assert machine.remaining_balance() == before

    def test_order_independent(self, machine: WizardStateMachine, world: WorldSnapshot) -> None:
        _ready(machine, world)
        machine.state.location_index = 1
        machine.state.selected_candidates = ("ann", "bob")
        forward = machine.remaining_balance()
        machine.state.selected_candidates = ("bob", "ann")
        assert machine.remaining_balance() == forward

    def test_no_locations_counts_vessel_only(self) -> None:
        ledger = BudgetLedger(500, VESSELS)
        machine = WizardStateMachine(500, channels=CHANNELS, vessel_classes=VESSELS)
        assert ledger.remaining_balance(machine.state) == 400


class TestSelectedVessel:
    """Vessel preview built from class, name and colours."""

    def test_preview_carries_name_and_colours(
        self, machine: WizardStateMachine, world: WorldSnapshot
    ) -> None:
        _ready(machine, world)
        machine.state.vessel_name = "Pearl"
        machine.state.vessel_index = 1
        vessel = machine.ledger.selected_vessel(machine.state)
        assert vessel.name == "Pearl"
        assert vessel.vessel_class.name == "Galleon"
        assert vessel.colors == CHANNELS
        assert vessel.cost == 300

    def test_cost_ignores_name_and_colours(
        self, machine: WizardStateMachine, world: WorldSnapshot
    ) -> None:
        _ready(machine, world)
        machine.state.vessel_name = "Other"
        machine.set_channel(2, ColorPreset.IVORY)
        assert machine.ledger.selected_vessel(machine.state).cost == 100
