"""Entry point: python -m crew_creation [snapshot.yaml]. Exit codes in crew_creation.constants."""

import json
import logging
import sys
from pathlib import Path

import yaml
from pydantic import ValidationError

from core.logging_config import setup_logging
from core.settings import get_setting, load_settings
from crew_creation.console import run_console
from crew_creation.constants import CREATION_CANCELLED, CREATION_COMMITTED, CREATION_FAILED
from crew_creation.intents import CreateOrganization
from crew_creation.snapshot import load_snapshot
from crew_creation.wizard import WizardStateMachine

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Run the wizard against a world snapshot. Prints the committed crew as JSON."""
    args = sys.argv[1:] if argv is None else argv
    project_root = Path(__file__).resolve().parent.parent
    settings = load_settings(project_root / "config")
    setup_logging(project_root, settings)

    snapshot_path = Path(args[0]) if args else project_root / get_setting(
        settings, "wizard.snapshot_file", "config/world.yaml"
    )
    try:
        snapshot = load_snapshot(snapshot_path)
    except (OSError, ValueError, ValidationError, yaml.YAMLError) as e:
        logger.error("Cannot load snapshot %s: %s", snapshot_path, e)
        print(f"Cannot load world snapshot {snapshot_path}: {e}", file=sys.stderr)
        return CREATION_FAILED

    machine = WizardStateMachine.from_settings(settings)
    try:
        intent = run_console(machine, snapshot)
    except KeyboardInterrupt:
        print("\n\nCrew creation cancelled.")
        return CREATION_CANCELLED

    if isinstance(intent, CreateOrganization):
        print(json.dumps(intent.to_payload(), indent=2))
        return CREATION_COMMITTED

    print("\nCrew creation cancelled.")
    return CREATION_CANCELLED


if __name__ == "__main__":
    sys.exit(main())
