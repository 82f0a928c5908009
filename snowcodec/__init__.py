from __future__ import annotations

from .errors import ConfigurationError
from .idgen import (
    INCREMENT_BITS,
    MAX_INCREMENT,
    MAX_PROCESS_ID,
    MAX_WORKER_ID,
    PROCESS_ID_BITS,
    WORKER_ID_BITS,
    DeconstructedSnowflake,
    Snowflake,
    SnowflakeLayout,
)

__all__ = [
    "ConfigurationError",
    "INCREMENT_BITS",
    "MAX_INCREMENT",
    "MAX_PROCESS_ID",
    "MAX_WORKER_ID",
    "PROCESS_ID_BITS",
    "WORKER_ID_BITS",
    "DeconstructedSnowflake",
    "Snowflake",
    "SnowflakeLayout",
]

__version__ = "0.1.0"
