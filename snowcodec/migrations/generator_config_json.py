from __future__ import annotations

from typing import Any, Dict, List

from snowcodec.migrations.types import MigrationError, MigrationOutcome
from snowcodec.models.common import as_int


LATEST_GENERATOR_CONFIG_SCHEMA_VERSION = 1


def migrate_generator_config_json(data: Dict[str, Any]) -> MigrationOutcome:
    """
    snowflake.json migrations
    Current latest: v1

    Policy:
    - Ensure root is dict
    - Ensure schema_version exists; files from a newer schema are rejected
    - Ensure worker_id/process_id exist (defaults 0/1)
    """
    if not isinstance(data, dict):
        data = {}

    from_ver = as_int(data.get("schema_version", LATEST_GENERATOR_CONFIG_SCHEMA_VERSION), LATEST_GENERATOR_CONFIG_SCHEMA_VERSION)
    if from_ver > LATEST_GENERATOR_CONFIG_SCHEMA_VERSION:
        raise MigrationError(
            f"snowflake.json schema_version {from_ver} is newer than supported "
            f"{LATEST_GENERATOR_CONFIG_SCHEMA_VERSION}"
        )

    notes: List[str] = []

    if data.get("schema_version") != LATEST_GENERATOR_CONFIG_SCHEMA_VERSION:
        data["schema_version"] = LATEST_GENERATOR_CONFIG_SCHEMA_VERSION
        notes.append(f"schema_version set to {LATEST_GENERATOR_CONFIG_SCHEMA_VERSION}")

    for key, default in (("worker_id", 0), ("process_id", 1)):
        if key not in data:
            data[key] = default
            notes.append(f"{key} defaulted to {default}")

    return MigrationOutcome(
        data=data,
        changed=bool(notes),
        from_version=from_ver,
        to_version=LATEST_GENERATOR_CONFIG_SCHEMA_VERSION,
        notes="; ".join(notes),
    )
