"""Process-wide learner action settings, read once from the environment at import."""

import os


def _read_latest_schema_version() -> int:
    raw = os.environ.get("LEARNER_ACTION_SCHEMA_LATEST_VERSION", "1")
    try:
        version = int(raw)
    except ValueError:
        raise ValueError(
            f"LEARNER_ACTION_SCHEMA_LATEST_VERSION must be an integer, got {raw!r}"
        ) from None
    if version < 1:
        raise ValueError(
            f"LEARNER_ACTION_SCHEMA_LATEST_VERSION must be >= 1, got {version}"
        )
    return version


# Stamped on every freshly created action. Read-only after import.
LEARNER_ACTION_SCHEMA_LATEST_VERSION: int = _read_latest_schema_version()
