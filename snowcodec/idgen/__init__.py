from __future__ import annotations

from .layout import (
    INCREMENT_BITS,
    MAX_INCREMENT,
    MAX_PROCESS_ID,
    MAX_WORKER_ID,
    PROCESS_ID_BITS,
    WORKER_ID_BITS,
    SnowflakeLayout,
)
from .snowflake import DeconstructedSnowflake, Snowflake

__all__ = [
    "INCREMENT_BITS",
    "MAX_INCREMENT",
    "MAX_PROCESS_ID",
    "MAX_WORKER_ID",
    "PROCESS_ID_BITS",
    "WORKER_ID_BITS",
    "SnowflakeLayout",
    "DeconstructedSnowflake",
    "Snowflake",
]
