"""Exit codes for the crew creation console."""

CREATION_COMMITTED = 0  # CreateOrganization emitted
CREATION_CANCELLED = 1  # CancelCreation emitted or Ctrl+C
CREATION_FAILED = 2  # Snapshot could not be loaded
