"""Fixed creation catalog: vessel classes, theme styles and the colour palette."""

import random
from dataclasses import dataclass
from enum import Enum

# Distance and time units used by vessel stats
AU = 150_000_000  # km
HOURS = 3600  # seconds


class ColorPreset(Enum):
    """Palette cycled through by each theme colour channel."""

    CRIMSON = (200, 30, 45)
    EMBER = (230, 110, 40)
    GOLD = (235, 190, 60)
    MOSS = (90, 140, 60)
    TEAL = (40, 150, 150)
    COBALT = (40, 80, 190)
    VIOLET = (120, 60, 170)
    ROSE = (220, 120, 160)
    IVORY = (240, 235, 215)
    SLATE = (90, 100, 110)
    CHARCOAL = (40, 40, 45)

    @property
    def rgb(self) -> tuple[int, int, int]:
        return self.value

    def next(self) -> "ColorPreset":
        presets = list(ColorPreset)
        return presets[(presets.index(self) + 1) % len(presets)]


class ThemeStyle(Enum):
    CLASSIC = "classic"
    STRIPED = "striped"
    FADED = "faded"
    HALF_AND_HALF = "half and half"
    PIRATE = "pirate"

    @property
    def available_at_creation(self) -> bool:
        return self is not ThemeStyle.PIRATE

    def __str__(self) -> str:
        return self.value.title()


@dataclass(frozen=True)
class VesselClass:
    """Vessel template. Cost depends only on the class."""

    name: str
    cost: int
    speed: float  # km/s
    capacity: int
    fuel_consumption: float  # t/s
    tank: int  # t

    def max_distance(self) -> float:
        """Distance in km reachable on a full tank."""
        if self.fuel_consumption <= 0:
            return float("inf")
        return self.tank / self.fuel_consumption * self.speed


@dataclass(frozen=True)
class Vessel:
    """A named, coloured vessel built from a class for preview and commit."""

    name: str
    vessel_class: VesselClass
    colors: tuple["ColorPreset", "ColorPreset", "ColorPreset"]

    @property
    def cost(self) -> int:
        return self.vessel_class.cost


VESSEL_CLASSES: list[VesselClass] = [
    VesselClass("Skiff", 18000, 1200.0, 6, 0.0025, 60),
    VesselClass("Cutter", 26000, 1500.0, 7, 0.0035, 85),
    VesselClass("Galleon", 38000, 1000.0, 10, 0.0050, 140),
    VesselClass("Corsair", 52000, 1900.0, 8, 0.0060, 120),
]

THEME_STYLES: list[ThemeStyle] = [s for s in ThemeStyle if s.available_at_creation]


def shuffled_channels(seed: int | None = None) -> tuple[ColorPreset, ColorPreset, ColorPreset]:
    """Pick three distinct starting presets. A fixed seed gives a reproducible pick."""
    presets = list(ColorPreset)
    random.Random(seed).shuffle(presets)
    return presets[0], presets[1], presets[2]
