from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ConfigurationError(Exception):
    """
    Raised when a generator is used before it is fully configured
    (currently: reading the epoch before `set_epoch` was called).

    Not transient: retrying without fixing the configuration fails again.
    """
    message: str
    field: str = ""

    def __str__(self) -> str:
        if self.field:
            return f"{self.message} (field={self.field})"
        return self.message
