"""Crew creation state machine: stage transitions, input handling and gating."""

import logging
from typing import Any, Callable

from core.settings import get_setting
from crew_creation.catalog import (
    THEME_STYLES,
    VESSEL_CLASSES,
    ColorPreset,
    ThemeStyle,
    VesselClass,
    shuffled_channels,
)
from crew_creation.cursor import SplitPanel
from crew_creation.intents import Intent, IntentEmitter
from crew_creation.keys import CHANNEL_KEYS, KeyCode, KeyEvent
from crew_creation.ledger import BudgetLedger
from crew_creation.pool import PoolEntry
from crew_creation.snapshot import WorldSnapshot
from crew_creation.stages import Stage
from crew_creation.state import ConfirmChoice, WizardState
from crew_creation.validation import normalize_name, validate_name

logger = logging.getLogger(__name__)

__all__ = ["DEFAULT_TEAM_SIZE", "WizardStateMachine"]

DEFAULT_TEAM_SIZE = 6


class WizardStateMachine(SplitPanel):
    """Owns one WizardState and advances it one key event at a time.

    handle_key() returns an intent only from CONFIRMING; every other key
    results in at most one stage change, cursor move or buffer edit.
    """

    def __init__(
        self,
        starting_balance: int,
        team_size: int = DEFAULT_TEAM_SIZE,
        *,
        seed: int | None = None,
        channels: tuple[ColorPreset, ColorPreset, ColorPreset] | None = None,
        vessel_classes: list[VesselClass] | None = None,
        theme_styles: list[ThemeStyle] | None = None,
        sink: Callable[[Intent], None] | None = None,
    ) -> None:
        self.team_size = team_size
        self.vessel_classes = vessel_classes or VESSEL_CLASSES
        self.theme_styles = theme_styles or THEME_STYLES
        self.ledger = BudgetLedger(starting_balance, self.vessel_classes)
        self.emitter = IntentEmitter(self.ledger, self.theme_styles, sink)
        self._seed = seed
        self._channels = channels
        self.state = self._fresh_state()

    @classmethod
    def from_settings(
        cls,
        settings: dict[str, Any],
        sink: Callable[[Intent], None] | None = None,
    ) -> "WizardStateMachine":
        return cls(
            starting_balance=int(get_setting(settings, "wizard.starting_balance", 0)),
            team_size=int(get_setting(settings, "wizard.team_size", DEFAULT_TEAM_SIZE)),
            seed=get_setting(settings, "wizard.seed"),
            sink=sink,
        )

    def _fresh_state(self) -> WizardState:
        return WizardState(channels=self._channels or shuffled_channels(self._seed))

    def reset(self) -> None:
        """Discard the current state so the wizard can be reused."""
        self.state = self._fresh_state()

    def update(self, snapshot: WorldSnapshot) -> None:
        """Per-tick hook: advance the animation tick and build the pool on first use."""
        self.state.tick += 1
        if self.state.pool.ensure_built(snapshot):
            self.state.location_index = 0
            self.state.candidate_index = 0

    # Derived values

    def remaining_balance(self) -> int:
        return self.ledger.remaining_balance(self.state)

    def current_bucket(self) -> list[PoolEntry]:
        location_id = self.state.location_id
        if location_id is None:
            return []
        return self.state.pool.bucket(location_id)

    def max_selectable(self) -> int:
        return min(self.team_size, len(self.current_bucket()))

    def enough_selected(self) -> bool:
        return len(self.state.selected_candidates) >= self.max_selectable()

    # Cursor routing

    def index(self) -> int:
        stage = self.state.stage
        if stage is Stage.CHOOSING_LOCATION:
            return self.state.location_index
        if stage is Stage.CHOOSING_THEME:
            return self.state.theme_index
        if stage is Stage.CHOOSING_VESSEL_CLASS:
            return self.state.vessel_index
        if stage is Stage.CHOOSING_ROSTER:
            return self.state.candidate_index
        return 0

    def max_index(self) -> int:
        stage = self.state.stage
        if stage is Stage.CHOOSING_LOCATION:
            return len(self.state.pool.location_ids)
        if stage is Stage.CHOOSING_THEME:
            return len(self.theme_styles)
        if stage is Stage.CHOOSING_VESSEL_CLASS:
            return len(self.vessel_classes)
        if stage is Stage.CHOOSING_ROSTER:
            return len(self.current_bucket())
        return 0

    def set_index(self, index: int) -> None:
        stage = self.state.stage
        if stage is Stage.CHOOSING_LOCATION:
            if index != self.state.location_index:
                # Selections belong to one location's bucket
                self.state.selected_candidates = ()
                self.state.candidate_index = 0
            self.state.location_index = index
        elif stage is Stage.CHOOSING_THEME:
            self.state.theme_index = index
        elif stage is Stage.CHOOSING_VESSEL_CLASS:
            self.state.vessel_index = index
        elif stage is Stage.CHOOSING_ROSTER:
            self.state.candidate_index = index

    # Mutations

    def set_stage(self, stage: Stage) -> None:
        """Enter a stage, keeping its stored index when still within the live bound."""
        if stage is Stage.CONFIRMING and self.remaining_balance() < 0:
            logger.debug("Refusing to confirm with negative balance")
            return
        logger.debug("Stage %s -> %s", self.state.stage.value, stage.value)
        self.state.stage = stage
        if self.index() >= max(self.max_index(), 1):
            self.set_index(0)

    def set_channel(self, channel: int, color: ColorPreset) -> None:
        channels = list(self.state.channels)
        channels[channel] = color
        self.state.channels = (channels[0], channels[1], channels[2])

    def cycle_channel(self, channel: int) -> None:
        self.set_channel(channel, self.state.channels[channel].next())

    def clear_selected_candidates(self) -> None:
        self.state.selected_candidates = ()

    def toggle_candidate(self) -> None:
        """Toggle the candidate under the cursor; adding is capped at max_selectable()."""
        bucket = self.current_bucket()
        if not bucket:
            return
        candidate_id = bucket[self.state.candidate_index].candidate_id
        selected = self.state.selected_candidates
        if candidate_id in selected:
            self.state.selected_candidates = tuple(c for c in selected if c != candidate_id)
        elif len(selected) < self.max_selectable():
            self.state.selected_candidates = (*selected, candidate_id)

    # Key handling

    def handle_key(self, event: KeyEvent) -> Intent | None:
        if event.code is KeyCode.UP:
            self.next_index()
            return None
        if event.code is KeyCode.DOWN:
            self.previous_index()
            return None

        stage = self.state.stage
        if stage is Stage.NAMING_ORG:
            self._handle_org_name(event)
        elif stage is Stage.NAMING_VESSEL:
            self._handle_vessel_name(event)
        elif stage is Stage.CHOOSING_LOCATION:
            self._handle_location(event)
        elif stage in (Stage.CHOOSING_THEME, Stage.CHOOSING_VESSEL_CLASS):
            self._handle_theme_or_vessel(event)
        elif stage is Stage.CHOOSING_ROSTER:
            self._handle_roster(event)
        elif stage is Stage.CONFIRMING:
            return self._handle_confirm(event)
        return None

    def _handle_org_name(self, event: KeyEvent) -> None:
        if event.code is KeyCode.ENTER:
            check = validate_name(self.state.org_name)
            self.state.org_name_check = check
            if not check.ok:
                logger.debug("Crew name rejected: %s", check.value)
                return
            self.state.org_name = normalize_name(self.state.org_name)
            self.set_stage(self.state.stage.next())
            return
        self.state.org_name = _edit(self.state.org_name, event)
        self.state.org_name_check = validate_name(self.state.org_name)

    def _handle_vessel_name(self, event: KeyEvent) -> None:
        if event.code is KeyCode.ENTER:
            check = validate_name(self.state.vessel_name)
            self.state.vessel_name_check = check
            if not check.ok:
                logger.debug("Vessel name rejected: %s", check.value)
                return
            self.state.vessel_name = normalize_name(self.state.vessel_name)
            self.set_stage(self.state.stage.next())
            return
        if event.code is KeyCode.BACKSPACE and not self.state.vessel_name:
            self.set_stage(self.state.stage.previous())
            return
        self.state.vessel_name = _edit(self.state.vessel_name, event)
        self.state.vessel_name_check = validate_name(self.state.vessel_name)

    def _handle_location(self, event: KeyEvent) -> None:
        if event.code is KeyCode.ENTER:
            if self.state.location_id is None:
                logger.debug("No populated location to choose from")
                return
            self.set_stage(self.state.stage.next())
        elif event.code is KeyCode.BACKSPACE:
            self.set_stage(self.state.stage.previous())

    def _handle_theme_or_vessel(self, event: KeyEvent) -> None:
        if event.code is KeyCode.ENTER:
            self.set_stage(self.state.stage.next())
        elif event.code is KeyCode.BACKSPACE:
            self.set_stage(self.state.stage.previous())
        elif event.code is KeyCode.CHAR and event.char in CHANNEL_KEYS:
            self.cycle_channel(CHANNEL_KEYS[event.char])

    def _handle_roster(self, event: KeyEvent) -> None:
        if event.code is KeyCode.ENTER:
            self.toggle_candidate()
            if self.remaining_balance() >= 0 and self.enough_selected():
                self.set_stage(self.state.stage.next())
        elif event.code is KeyCode.BACKSPACE:
            self.clear_selected_candidates()
            self.set_stage(self.state.stage.previous())

    def _handle_confirm(self, event: KeyEvent) -> Intent | None:
        if event.code is KeyCode.ENTER:
            intent: Intent = self.emitter.commit(self.state)
        elif event.code is KeyCode.BACKSPACE:
            self.set_index(0)
            intent = self.emitter.cancel()
        else:
            if event.code is KeyCode.LEFT:
                self.state.confirm = ConfirmChoice.YES
            elif event.code is KeyCode.RIGHT:
                self.state.confirm = ConfirmChoice.NO
            return None
        self.reset()
        return intent


def _edit(buffer: str, event: KeyEvent) -> str:
    """Apply a text-editing key to a single-line buffer."""
    if event.code is KeyCode.CHAR:
        return buffer + event.char
    if event.code is KeyCode.BACKSPACE:
        return buffer[:-1]
    return buffer
