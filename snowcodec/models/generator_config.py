from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from snowcodec.models.common import as_dict, as_int, as_opt_int, non_negative


@dataclass
class GeneratorConfig:
    """
    Persisted snowflake generator settings (snowflake.json).

    epoch_ms None means "not configured yet"; the repo fills it on first run.
    """
    schema_version: int = 1
    epoch_ms: Optional[int] = None
    worker_id: int = 0
    process_id: int = 1

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "GeneratorConfig":
        d = as_dict(d)
        return GeneratorConfig(
            schema_version=as_int(d.get("schema_version", 1), 1),
            epoch_ms=as_opt_int(d.get("epoch_ms")),
            worker_id=non_negative(as_int(d.get("worker_id", 0), 0), 0),
            process_id=non_negative(as_int(d.get("process_id", 1), 1), 1),
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "schema_version": int(self.schema_version),
            "worker_id": int(self.worker_id),
            "process_id": int(self.process_id),
        }
        if self.epoch_ms is not None:
            out["epoch_ms"] = int(self.epoch_ms)
        return out
