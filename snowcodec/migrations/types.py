from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


class MigrationError(RuntimeError):
    """Config file cannot be brought to the latest schema (e.g. it is newer)."""


@dataclass(frozen=True)
class MigrationOutcome:
    """
    Result of normalizing one config file.

    `notes` lists what was filled in or rewritten, "; "-separated, empty if nothing.
    """
    data: Dict[str, Any]
    changed: bool
    from_version: int
    to_version: int
    notes: str = ""
