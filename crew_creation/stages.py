"""Ordered stages of the crew creation wizard."""

from enum import Enum
from functools import total_ordering

__all__ = ["Stage"]


@total_ordering
class Stage(Enum):
    """One discrete wizard step. Ordered by declaration; next/previous saturate at the ends."""

    NAMING_ORG = "naming_org"
    NAMING_VESSEL = "naming_vessel"
    CHOOSING_LOCATION = "choosing_location"
    CHOOSING_THEME = "choosing_theme"
    CHOOSING_VESSEL_CLASS = "choosing_vessel_class"
    CHOOSING_ROSTER = "choosing_roster"
    CONFIRMING = "confirming"

    @property
    def position(self) -> int:
        return _ORDER.index(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Stage):
            return NotImplemented
        return self.position < other.position

    def next(self) -> "Stage":
        return _ORDER[min(self.position + 1, len(_ORDER) - 1)]

    def previous(self) -> "Stage":
        return _ORDER[max(self.position - 1, 0)]


_ORDER: list[Stage] = list(Stage)
