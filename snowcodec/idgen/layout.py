from __future__ import annotations

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class SnowflakeLayout:
    """
    Bit layout of a snowflake (low bits first):
      - increment:  12 bits
      - process_id:  5 bits
      - worker_id:   5 bits
      - timestamp:  remaining high bits (ms since the generator epoch)

    The timestamp field is nominally 42 bits wide but is never masked on
    generate; a larger elapsed value simply produces a wider integer.
    """
    increment_bits: int = 12
    process_bits: int = 5
    worker_bits: int = 5

    @property
    def max_increment(self) -> int:
        return (1 << self.increment_bits) - 1

    @property
    def max_process_id(self) -> int:
        return (1 << self.process_bits) - 1

    @property
    def max_worker_id(self) -> int:
        return (1 << self.worker_bits) - 1

    @property
    def process_shift(self) -> int:
        return self.increment_bits

    @property
    def worker_shift(self) -> int:
        return self.increment_bits + self.process_bits

    @property
    def timestamp_shift(self) -> int:
        return self.increment_bits + self.process_bits + self.worker_bits


LAYOUT: Final[SnowflakeLayout] = SnowflakeLayout()

INCREMENT_BITS: Final[int] = LAYOUT.increment_bits
PROCESS_ID_BITS: Final[int] = LAYOUT.process_bits
WORKER_ID_BITS: Final[int] = LAYOUT.worker_bits

MAX_INCREMENT: Final[int] = LAYOUT.max_increment  # 4095
MAX_PROCESS_ID: Final[int] = LAYOUT.max_process_id  # 31
MAX_WORKER_ID: Final[int] = LAYOUT.max_worker_id  # 31
