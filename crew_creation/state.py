"""Shared wizard state."""

from dataclasses import dataclass, field
from enum import Enum

from crew_creation.catalog import ColorPreset
from crew_creation.pool import CandidatePool
from crew_creation.stages import Stage
from crew_creation.validation import NameCheck


class ConfirmChoice(Enum):
    YES = "yes"
    NO = "no"


@dataclass
class WizardState:
    """Mutable state collected during crew creation.

    Field ownership: org_name* belongs to NAMING_ORG, vessel_name* to
    NAMING_VESSEL, location_index to CHOOSING_LOCATION, theme_index and
    channels to CHOOSING_THEME, vessel_index to CHOOSING_VESSEL_CLASS,
    candidate_index and selected_candidates to CHOOSING_ROSTER, confirm to
    CONFIRMING. The pool and the names are read across stages.
    """

    channels: tuple[ColorPreset, ColorPreset, ColorPreset]
    stage: Stage = Stage.NAMING_ORG
    tick: int = 0
    org_name: str = ""
    org_name_check: NameCheck = NameCheck.TOO_SHORT
    vessel_name: str = ""
    vessel_name_check: NameCheck = NameCheck.TOO_SHORT
    location_index: int = 0
    theme_index: int = 0
    vessel_index: int = 0
    candidate_index: int = 0
    selected_candidates: tuple[str, ...] = ()
    confirm: ConfirmChoice = ConfirmChoice.YES
    pool: CandidatePool = field(default_factory=CandidatePool)

    @property
    def location_id(self) -> str | None:
        return self.pool.location_at(self.location_index)
