"""Discrete key events delivered to the wizard one at a time."""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "BACKSPACE",
    "CHANNEL_KEYS",
    "DOWN",
    "ENTER",
    "LEFT",
    "RIGHT",
    "UP",
    "KeyCode",
    "KeyEvent",
]


class KeyCode(Enum):
    CHAR = "char"
    ENTER = "enter"
    BACKSPACE = "backspace"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class KeyEvent:
    code: KeyCode
    char: str = ""

    @classmethod
    def of(cls, char: str) -> "KeyEvent":
        """Raw text input of a single character."""
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        return cls(KeyCode.CHAR, char)

    @classmethod
    def text(cls, value: str) -> list["KeyEvent"]:
        return [cls.of(c) for c in value]


ENTER = KeyEvent(KeyCode.ENTER)
BACKSPACE = KeyEvent(KeyCode.BACKSPACE)
UP = KeyEvent(KeyCode.UP)
DOWN = KeyEvent(KeyCode.DOWN)
LEFT = KeyEvent(KeyCode.LEFT)
RIGHT = KeyEvent(KeyCode.RIGHT)

# Theme colour channel cycle keys, channel index by key
CHANNEL_KEYS: dict[str, int] = {"r": 0, "g": 1, "b": 2}
