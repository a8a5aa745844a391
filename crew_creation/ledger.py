"""Remaining balance derived from the current selections."""

from crew_creation.catalog import VESSEL_CLASSES, Vessel, VesselClass
from crew_creation.state import WizardState

__all__ = ["BudgetLedger"]


class BudgetLedger:
    """Pure budget arithmetic over a WizardState.

    Nothing is cached: the balance depends on the location, the roster and
    the vessel class, which change independently, so every call recomputes.
    """

    def __init__(
        self,
        starting_balance: int,
        vessel_classes: list[VesselClass] | None = None,
    ) -> None:
        self.starting_balance = starting_balance
        self.vessel_classes = vessel_classes or VESSEL_CLASSES

    def vessel_class(self, state: WizardState) -> VesselClass:
        return self.vessel_classes[state.vessel_index]

    def selected_vessel(self, state: WizardState) -> Vessel:
        """Preview of the vessel being built; name and colours do not affect its cost."""
        return Vessel(
            name=state.vessel_name,
            vessel_class=self.vessel_class(state),
            colors=state.channels,
        )

    def hiring_costs(self, state: WizardState) -> int:
        """Sum of hire costs of selected candidates in the current location's bucket."""
        location_id = state.location_id
        if location_id is None:
            return 0
        selected = set(state.selected_candidates)
        return sum(
            entry.hire_cost
            for entry in state.pool.bucket(location_id)
            if entry.candidate_id in selected
        )

    def remaining_balance(self, state: WizardState) -> int:
        """Starting balance minus hiring costs minus vessel cost. May be negative."""
        return (
            self.starting_balance
            - self.hiring_costs(state)
            - self.vessel_class(state).cost
        )
