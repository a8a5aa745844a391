"""Line-based console host for the wizard.

Each prompt line is translated into key events: plain text is typed
character by character, /up /down /left /right /enter /back are keys, and an
empty line is Enter. Panels are printed from render descriptors.
"""

import logging
import re
from typing import Callable

import questionary

from crew_creation.intents import Intent
from crew_creation.keys import BACKSPACE, DOWN, ENTER, LEFT, RIGHT, UP, KeyEvent
from crew_creation.render import Frame, Panel, StyleTag, render_frame
from crew_creation.snapshot import WorldSnapshot
from crew_creation.ui import STYLE, TAG_STYLES
from crew_creation.wizard import WizardStateMachine

logger = logging.getLogger(__name__)

KEY_WORDS: dict[str, KeyEvent] = {
    "/up": UP,
    "/down": DOWN,
    "/left": LEFT,
    "/right": RIGHT,
    "/enter": ENTER,
    "/back": BACKSPACE,
}

_KEY_PATTERN = re.compile(r"(/[a-z]+)", re.IGNORECASE)


def parse_keys(raw: str) -> list[KeyEvent]:
    """Translate one prompt line into key events."""
    if not raw.strip():
        return [ENTER]
    events: list[KeyEvent] = []
    for part in _KEY_PATTERN.split(raw):
        key = KEY_WORDS.get(part.lower())
        if key is not None:
            events.append(key)
        elif part:
            events.extend(KeyEvent.text(part))
    return events


def _print_panel(panel: Panel) -> None:
    style = TAG_STYLES[panel.style]
    questionary.print(f"┌ {panel.title}", style=style)
    for line in panel.lines:
        questionary.print(f"│ {line}", style=style)
    for i, item in enumerate(panel.items):
        marker = "›" if i == panel.selected else " "
        tag = StyleTag.SELECTED if i == panel.selected else item.style
        questionary.print(f"│{marker}{item.text}", style=TAG_STYLES[tag])


def print_frame(frame: Frame) -> None:
    print()
    for panel in frame.panels:
        _print_panel(panel)
    _print_panel(frame.detail)
    if frame.overlay is not None:
        _print_panel(frame.overlay)


def _ask() -> str | None:
    return questionary.text("keys:", style=STYLE).ask()


def run_console(
    machine: WizardStateMachine,
    snapshot: WorldSnapshot,
    ask: Callable[[], str | None] | None = None,
    show: Callable[[Frame], None] | None = None,
) -> Intent:
    """Drive the wizard until it emits an intent. Ctrl+C at the prompt cancels."""
    ask = ask or _ask
    show = show or print_frame
    while True:
        machine.update(snapshot)
        frame = render_frame(machine, snapshot)
        if frame is not None:
            show(frame)
        raw = ask()
        if raw is None:
            intent: Intent = machine.emitter.cancel()
            machine.reset()
            return intent
        for event in parse_keys(raw):
            intent_or_none = machine.handle_key(event)
            if intent_or_none is not None:
                return intent_or_none
