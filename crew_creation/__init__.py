"""Crew creation wizard: stage machine, budget gating and candidate pool."""

from crew_creation.constants import CREATION_CANCELLED, CREATION_COMMITTED, CREATION_FAILED
from crew_creation.intents import CancelCreation, CreateOrganization
from crew_creation.stages import Stage
from crew_creation.wizard import WizardStateMachine

__all__ = [
    "CREATION_CANCELLED",
    "CREATION_COMMITTED",
    "CREATION_FAILED",
    "CancelCreation",
    "CreateOrganization",
    "Stage",
    "WizardStateMachine",
]
