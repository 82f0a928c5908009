from __future__ import annotations

from typing import Any, Dict, Optional


def as_dict(v: Any) -> Dict[str, Any]:
    return v if isinstance(v, dict) else {}


def as_int(v: Any, default: int = 0) -> int:
    try:
        if v is None:
            return default
        return int(v)
    except (TypeError, ValueError):
        return default


def as_opt_int(v: Any) -> Optional[int]:
    """None (or anything non-numeric) stays None; everything else becomes int."""
    if v is None or isinstance(v, bool):
        return None
    try:
        return int(v)
    except (TypeError, ValueError):
        return None


def non_negative(v: int, default: int) -> int:
    return v if v >= 0 else default
