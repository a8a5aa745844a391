"""Outbound intents: the only externally observable effect of the wizard.

The shell owns execution. A CreateOrganization is turned into a real crew by
whoever receives it; the wizard never touches the world or persistence.
"""

import logging
from dataclasses import asdict, dataclass
from typing import Any, Callable, Union

from crew_creation.catalog import ColorPreset, ThemeStyle
from crew_creation.ledger import BudgetLedger
from crew_creation.state import WizardState

logger = logging.getLogger(__name__)

__all__ = ["CancelCreation", "CreateOrganization", "Intent", "IntentEmitter", "Theme"]


@dataclass(frozen=True)
class Theme:
    style: ThemeStyle
    colors: tuple[ColorPreset, ColorPreset, ColorPreset]


@dataclass(frozen=True)
class CreateOrganization:
    """Everything the shell needs to create the crew."""

    name: str
    vessel_name: str
    location: str
    theme: Theme
    selected_candidates: tuple[str, ...]
    vessel_class: str
    final_balance: int

    def to_payload(self) -> dict[str, Any]:
        payload = asdict(self)
        payload["theme"] = {
            "style": self.theme.style.value,
            "colors": [c.name.lower() for c in self.theme.colors],
        }
        payload["selected_candidates"] = list(self.selected_candidates)
        return payload


@dataclass(frozen=True)
class CancelCreation:
    """Tells the shell to discard the wizard."""

    def to_payload(self) -> dict[str, Any]:
        return {}


Intent = Union[CreateOrganization, CancelCreation]


class IntentEmitter:
    """Builds intents from a finished wizard and forwards them to an optional sink."""

    def __init__(
        self,
        ledger: BudgetLedger,
        theme_styles: list[ThemeStyle],
        sink: Callable[[Intent], None] | None = None,
    ) -> None:
        self._ledger = ledger
        self._theme_styles = theme_styles
        self._sink = sink

    def commit(self, state: WizardState) -> CreateOrganization:
        """Snapshot the confirmed selections. Caller guarantees a location and a non-negative balance."""
        location_id = state.location_id
        if location_id is None:
            raise ValueError("cannot commit a crew without a home location")
        intent = CreateOrganization(
            name=state.org_name,
            vessel_name=state.vessel_name,
            location=location_id,
            theme=Theme(self._theme_styles[state.theme_index], state.channels),
            selected_candidates=state.selected_candidates,
            vessel_class=self._ledger.vessel_class(state).name,
            final_balance=self._ledger.remaining_balance(state),
        )
        logger.info(
            "Crew %r committed at %s with %d candidates, balance %d",
            intent.name,
            intent.location,
            len(intent.selected_candidates),
            intent.final_balance,
        )
        return self._emit(intent)

    def cancel(self) -> CancelCreation:
        logger.info("Crew creation cancelled")
        return self._emit(CancelCreation())

    def _emit(self, intent: Any) -> Any:
        if self._sink is not None:
            self._sink(intent)
        return intent
