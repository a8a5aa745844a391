"""Render descriptors: what each wizard panel shows, computed fresh from state every frame.

Layout and drawing belong to the host. Nothing here keeps widget objects
between frames; style tags are derived from the current stage each call.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from core.utils.formatting import format_credits, format_rate
from crew_creation.catalog import AU, HOURS
from crew_creation.snapshot import SnapshotError, WorldSnapshot
from crew_creation.stages import Stage
from crew_creation.state import ConfirmChoice
from crew_creation.validation import NameCheck
from crew_creation.wizard import WizardStateMachine

logger = logging.getLogger(__name__)

__all__ = ["Frame", "ListItem", "Panel", "StyleTag", "render_frame"]

YES_TEXT = "Ayay"
NO_TEXT = "Nay!"

INTRO = (
    "It's the year 2101. Corporations have taken over the world.",
    "The only way to be free is to join a pirate crew and start plundering the galaxy.",
    "",
    "Create your crew and start wandering the galaxy in search of worthy opponents.",
    "Choose your crew name, customize your vessel, and select a worthy roster.",
    "",
    "[Press enter to confirm selections.]",
)


class StyleTag(Enum):
    DEFAULT = "default"
    SELECTED = "selected"
    UNSELECTABLE = "unselectable"
    ERROR = "error"
    OK = "ok"


@dataclass(frozen=True)
class ListItem:
    text: str
    style: StyleTag = StyleTag.DEFAULT


@dataclass(frozen=True)
class Panel:
    key: str
    title: str
    style: StyleTag = StyleTag.DEFAULT
    lines: tuple[str, ...] = ()
    items: tuple[ListItem, ...] = ()
    selected: int | None = None


@dataclass(frozen=True)
class Frame:
    """Left column of selection panels, the detail panel, and the confirm overlay if any."""

    panels: tuple[Panel, ...]
    detail: Panel
    overlay: Panel | None = None

    def panel(self, key: str) -> Panel:
        for p in self.panels:
            if p.key == key:
                return p
        raise KeyError(key)


def render_frame(machine: WizardStateMachine, snapshot: WorldSnapshot) -> Frame | None:
    """Compute the frame for the current state.

    Returns None when the snapshot no longer matches the pool (stale ids);
    the host skips this frame and the wizard keeps running.
    """
    try:
        return _build_frame(machine, snapshot)
    except SnapshotError as e:
        logger.warning("Render pass aborted: %s", e)
        return None


def _build_frame(machine: WizardStateMachine, snapshot: WorldSnapshot) -> Frame:
    stage = machine.state.stage
    panels = (
        _balance_panel(machine),
        _name_panel(
            "org_name", "Crew name", machine.state.org_name,
            machine.state.org_name_check, stage, Stage.NAMING_ORG,
        ),
        _name_panel(
            "vessel_name", "Vessel name", machine.state.vessel_name,
            machine.state.vessel_name_check, stage, Stage.NAMING_VESSEL,
        ),
        _location_panel(machine, snapshot),
        _colors_panel(machine),
        _theme_panel(machine),
        _vessel_class_panel(machine),
        _roster_panel(machine, snapshot),
    )
    overlay = _confirm_panel(machine, snapshot) if stage is Stage.CONFIRMING else None
    return Frame(panels=panels, detail=_detail_panel(machine, snapshot), overlay=overlay)


def _stage_style(current: Stage, own: Stage) -> StyleTag:
    if current > own:
        return StyleTag.OK
    if current == own:
        return StyleTag.DEFAULT
    return StyleTag.UNSELECTABLE


def _balance_panel(machine: WizardStateMachine) -> Panel:
    balance = machine.remaining_balance()
    return Panel(
        key="balance",
        title="Remaining balance",
        style=StyleTag.OK if balance >= 0 else StyleTag.ERROR,
        lines=(f"Remaining balance: {format_credits(balance)}",),
    )


def _name_panel(
    key: str, title: str, text: str, check: NameCheck, current: Stage, own: Stage
) -> Panel:
    style = _stage_style(current, own)
    if current == own and text and not check.ok:
        style = StyleTag.ERROR
    return Panel(key=key, title=title, style=style, lines=(text,))


def _location_panel(machine: WizardStateMachine, snapshot: WorldSnapshot) -> Panel:
    title = "Choose location ↓/↑"
    stage = machine.state.stage
    if stage > Stage.CHOOSING_LOCATION:
        location = snapshot.get_location(machine.state.location_id or "")
        return Panel("location", title, StyleTag.OK, lines=(location.name,))
    if stage == Stage.CHOOSING_LOCATION:
        items = tuple(
            ListItem(snapshot.get_location(loc_id).name)
            for loc_id in machine.state.pool.location_ids
        )
        return Panel("location", title, items=items, selected=machine.state.location_index)
    return Panel("location", title, StyleTag.UNSELECTABLE)


def _colors_panel(machine: WizardStateMachine) -> Panel:
    stage = machine.state.stage
    if stage > Stage.CHOOSING_VESSEL_CLASS:
        style = StyleTag.OK
    elif stage >= Stage.CHOOSING_THEME:
        style = StyleTag.DEFAULT
    else:
        return Panel("colors", "Choose 'r' 'g' 'b'", StyleTag.UNSELECTABLE)
    items = tuple(
        ListItem(f"{key}: {preset.name.title()} #{preset.rgb[0]:02x}{preset.rgb[1]:02x}{preset.rgb[2]:02x}")
        for key, preset in zip("rgb", machine.state.channels)
    )
    return Panel("colors", "Choose 'r' 'g' 'b'", style, items=items)


def _theme_panel(machine: WizardStateMachine) -> Panel:
    title = "Choose theme style ↓/↑"
    stage = machine.state.stage
    if stage > Stage.CHOOSING_THEME:
        style = machine.theme_styles[machine.state.theme_index]
        return Panel("theme", title, StyleTag.OK, lines=(str(style),))
    if stage == Stage.CHOOSING_THEME:
        items = tuple(ListItem(str(s)) for s in machine.theme_styles)
        return Panel("theme", title, items=items, selected=machine.state.theme_index)
    return Panel("theme", title, StyleTag.UNSELECTABLE)


def _vessel_class_panel(machine: WizardStateMachine) -> Panel:
    title = "Choose vessel class ↓/↑"
    stage = machine.state.stage
    if stage > Stage.CHOOSING_VESSEL_CLASS:
        chosen = machine.vessel_classes[machine.state.vessel_index]
        return Panel("vessel_class", title, StyleTag.OK, lines=(chosen.name,))
    if stage == Stage.CHOOSING_VESSEL_CLASS:
        items = tuple(
            ListItem(f"{vc.name:<12} {format_credits(vc.cost):>10}")
            for vc in machine.vessel_classes
        )
        return Panel("vessel_class", title, items=items, selected=machine.state.vessel_index)
    return Panel("vessel_class", title, StyleTag.UNSELECTABLE)


def _roster_panel(machine: WizardStateMachine, snapshot: WorldSnapshot) -> Panel:
    state = machine.state
    remaining = machine.max_selectable() - len(state.selected_candidates)
    title = f"Select {remaining} candidates"
    if state.stage < Stage.CHOOSING_ROSTER:
        return Panel("roster", title, StyleTag.UNSELECTABLE)

    done = state.stage > Stage.CHOOSING_ROSTER
    items = []
    for entry in machine.current_bucket():
        is_selected = entry.candidate_id in state.selected_candidates
        if done and not is_selected:
            continue
        candidate = snapshot.get_candidate(entry.candidate_id)
        items.append(
            ListItem(
                f"{candidate.full_name:23} {format_credits(entry.hire_cost):>10}",
                StyleTag.OK if is_selected and not done else StyleTag.DEFAULT,
            )
        )
    return Panel(
        "roster",
        title,
        StyleTag.OK if done else StyleTag.DEFAULT,
        items=tuple(items),
        selected=None if done else state.candidate_index,
    )


def _detail_panel(machine: WizardStateMachine, snapshot: WorldSnapshot) -> Panel:
    state = machine.state
    stage = state.stage

    if stage == Stage.CHOOSING_LOCATION and state.location_id is not None:
        location = snapshot.get_location(state.location_id)
        return Panel(
            "detail",
            location.name,
            lines=(
                f"Population: {location.population}",
                location.description,
                f"Frame: {state.tick // location.rotation_period}",
            ),
        )

    if stage == Stage.CHOOSING_THEME:
        style = machine.theme_styles[state.theme_index]
        lines = [f"Style: {style}"]
        bucket = machine.current_bucket()
        if bucket:
            model = snapshot.get_candidate(bucket[0].candidate_id)
            lines.append(f"Modelled by {model.full_name}")
        lines.append(f"Frame: {state.tick // 8}")
        return Panel("detail", "Theme preview", lines=tuple(lines))

    if stage == Stage.CHOOSING_VESSEL_CLASS:
        vessel = machine.ledger.selected_vessel(state)
        spec = vessel.vessel_class
        return Panel(
            "detail",
            spec.name,
            lines=(
                f"Vessel name: {vessel.name}",
                f"Speed: {format_rate(spec.speed * HOURS / AU, 'AU/h', 3)}",
                f"Capacity: {spec.capacity}",
                f"Consumption: {format_rate(spec.fuel_consumption * HOURS, 't/h')}",
                f"Tank: {spec.tank} t",
                f"Max distance: {format_rate(spec.max_distance() / AU, 'AU', 0)}",
                f"Cost: {format_credits(vessel.cost)}",
            ),
        )

    if stage == Stage.CHOOSING_ROSTER:
        bucket = machine.current_bucket()
        if not bucket:
            return Panel("detail", "Roster", lines=("No candidates available here.",))
        entry = bucket[state.candidate_index]
        candidate = snapshot.get_candidate(entry.candidate_id)
        home = snapshot.get_location(candidate.home_location_id)
        return Panel(
            "detail",
            candidate.full_name,
            lines=(
                f"Role: {candidate.role or 'unassigned'}",
                f"Rating: {candidate.rating}",
                f"Home: {home.name}",
                f"Hire cost: {format_credits(entry.hire_cost)}",
            ),
        )

    return Panel("detail", "New crew", lines=INTRO)


def _confirm_panel(machine: WizardStateMachine, snapshot: WorldSnapshot) -> Panel:
    location = snapshot.get_location(machine.state.location_id or "")
    return Panel(
        "confirm",
        "Confirm",
        lines=(
            f"{machine.state.org_name} from {location.name}",
            "Ready to sail the cosmic waves?",
        ),
        items=(ListItem(YES_TEXT, StyleTag.OK), ListItem(NO_TEXT, StyleTag.ERROR)),
        selected=0 if machine.state.confirm is ConfirmChoice.YES else 1,
    )
