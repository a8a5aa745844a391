"""Bounded, wrapping index navigation shared by every selection list.

Location, theme, vessel class and roster stages each keep their own index
field; SplitPanel routes the generic operations to whichever field the
active stage owns, so the modulo logic lives in one place.
"""

from abc import ABC, abstractmethod

__all__ = ["SplitPanel"]


class SplitPanel(ABC):
    """Index navigation with wraparound over a list of live length max_index()."""

    @abstractmethod
    def index(self) -> int:
        """Current position."""

    @abstractmethod
    def max_index(self) -> int:
        """Exclusive upper bound, derived from the live list length."""

    @abstractmethod
    def set_index(self, index: int) -> None:
        """Store a new position. Range checking is the caller's job."""

    def next_index(self) -> None:
        bound = self.max_index()
        if bound > 0:
            self.set_index((self.index() + 1) % bound)
        else:
            self.set_index(0)

    def previous_index(self) -> None:
        bound = self.max_index()
        if bound > 0:
            self.set_index((self.index() + bound - 1) % bound)
        else:
            self.set_index(0)
