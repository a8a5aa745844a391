"""Length-bound validation for free-text name fields."""

from enum import Enum

__all__ = ["MAX_NAME_LENGTH", "MIN_NAME_LENGTH", "NameCheck", "normalize_name", "validate_name"]

MIN_NAME_LENGTH = 3
MAX_NAME_LENGTH = 12


class NameCheck(Enum):
    VALID = "valid"
    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"

    @property
    def ok(self) -> bool:
        return self is NameCheck.VALID


def validate_name(text: str) -> NameCheck:
    """Check the trimmed length against [MIN_NAME_LENGTH, MAX_NAME_LENGTH]."""
    length = len(text.strip())
    if length < MIN_NAME_LENGTH:
        return NameCheck.TOO_SHORT
    if length > MAX_NAME_LENGTH:
        return NameCheck.TOO_LONG
    return NameCheck.VALID


def normalize_name(text: str) -> str:
    """Trim and upper-case the first character. Applied once, when the name is accepted.

    Characters whose upper case is longer than one character (e.g. "ß") are
    kept as typed so an accepted name never grows past MAX_NAME_LENGTH.
    """
    name = text.strip()
    first = name[:1].upper()
    if len(first) != 1:
        first = name[:1]
    return first + name[1:]
