from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Dict, Final, Optional, Union

from snowcodec.errors import ConfigurationError
from snowcodec.idgen.layout import LAYOUT, SnowflakeLayout

if TYPE_CHECKING:
    from snowcodec.models.generator_config import GeneratorConfig

log = logging.getLogger(__name__)

TimeLike = Union[int, datetime]


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


def to_ms(value: TimeLike) -> int:
    """
    Milliseconds since the UNIX epoch. Naive datetimes are interpreted as
    local time (same as `datetime.timestamp`).
    """
    if isinstance(value, datetime):
        return int(value.timestamp() * 1000)
    return int(value)


@dataclass(frozen=True)
class DeconstructedSnowflake:
    worker_id: int
    process_id: int
    increment: int
    timestamp: int

    @property
    def datetime(self) -> datetime:
        return datetime.fromtimestamp(self.timestamp / 1000, tz=timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "worker_id": self.worker_id,
            "process_id": self.process_id,
            "increment": self.increment,
            "timestamp": self.timestamp,
        }


class Snowflake:
    """
    Snowflake encoder/decoder with a per-instance rolling increment.

    Layout: see SnowflakeLayout (timestamp | worker 5b | process 5b | increment 12b).

    Notes:
    - Worker/process ids are never range-checked; only their low bits are packed.
    - IDs generated within the same millisecond stay distinct for 4096 calls,
      after which the increment wraps and duplicates become possible.
    - The counter update is guarded by a lock, so one instance may be shared
      between threads.
    """

    _layout: Final[SnowflakeLayout] = LAYOUT

    def __init__(self) -> None:
        self._epoch: Optional[int] = None
        self._worker_id = 0
        self._process_id = 1

        self._lock = threading.Lock()
        self._increment = 0

    @classmethod
    def from_config(cls, config: "GeneratorConfig") -> "Snowflake":
        sf = cls().set_worker_id(config.worker_id).set_process_id(config.process_id)
        if config.epoch_ms is not None:
            sf.set_epoch(config.epoch_ms)
        return sf

    # -----------------------------
    # Configuration
    # -----------------------------

    def set_epoch(self, epoch: TimeLike) -> "Snowflake":
        self._epoch = to_ms(epoch)
        log.debug("snowflake epoch set to %s", self._epoch)
        return self

    def set_worker_id(self, worker_id: int) -> "Snowflake":
        self._worker_id = int(worker_id)
        return self

    def set_process_id(self, process_id: int) -> "Snowflake":
        self._process_id = int(process_id)
        return self

    @property
    def epoch(self) -> int:
        if self._epoch is None:
            raise ConfigurationError("snowflake epoch not set", field="epoch")
        return self._epoch

    @property
    def worker_id(self) -> int:
        return self._worker_id

    @property
    def process_id(self) -> int:
        return self._process_id

    # -----------------------------
    # Encode / decode
    # -----------------------------

    def generate(
        self,
        *,
        worker_id: Optional[int] = None,
        process_id: Optional[int] = None,
        timestamp: Optional[TimeLike] = None,
        increment: Optional[int] = None,
    ) -> int:
        """
        Pack a new snowflake.

        Every override defaults to the configured value (or the current time
        for `timestamp`). An explicit `increment` that fits in the field is used
        verbatim and leaves the internal counter alone; a wider one is ignored
        and the internal counter is used instead.
        """
        epoch = self.epoch

        wid = self._worker_id if worker_id is None else int(worker_id)
        pid = self._process_id if process_id is None else int(process_id)
        ts = _now_ms() if timestamp is None else to_ms(timestamp)

        if increment is not None and increment <= self._layout.max_increment:
            inc = int(increment)
        else:
            inc = self._next_increment()

        lay = self._layout
        return (
            ((ts - epoch) << lay.timestamp_shift)
            | ((wid & lay.max_worker_id) << lay.worker_shift)
            | ((pid & lay.max_process_id) << lay.process_shift)
            | (inc & lay.max_increment)
        )

    def deconstruct(self, snowflake: Union[int, str]) -> DeconstructedSnowflake:
        value = int(snowflake)
        lay = self._layout
        return DeconstructedSnowflake(
            worker_id=(value >> lay.worker_shift) & lay.max_worker_id,
            process_id=(value >> lay.process_shift) & lay.max_process_id,
            increment=value & lay.max_increment,
            timestamp=(value >> lay.timestamp_shift) + self.epoch,
        )

    def _next_increment(self) -> int:
        with self._lock:
            inc = self._increment
            self._increment = inc + 1
            if inc >= self._layout.max_increment:
                # handed out the last value of the field; start over
                self._increment = 0
                log.debug("snowflake increment wrapped (worker=%s process=%s)", self._worker_id, self._process_id)
            return inc
