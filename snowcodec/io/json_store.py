from __future__ import annotations

import json
import logging
import os
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional
from uuid import uuid4

log = logging.getLogger(__name__)


@dataclass
class JsonStoreError(Exception):
    path: Path
    message: str
    cause: Optional[BaseException] = None

    def __str__(self) -> str:
        base = f"{self.message} (path={self.path})"
        if self.cause is not None:
            return f"{base}; cause={type(self.cause).__name__}: {self.cause}"
        return base


class JsonReadError(JsonStoreError):
    pass


class JsonWriteError(JsonStoreError):
    pass


def ensure_dir(dir_path: Path) -> None:
    try:
        dir_path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise JsonWriteError(path=dir_path, message="Failed to create directory", cause=e) from e


def read_json(path: Path, *, default: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Read a JSON object from `path`.

    A missing or blank file yields a copy of `default` (or {}).
    Invalid JSON, or a root that is not an object, raises JsonReadError.
    """
    fallback = dict(default or {})
    if not path.exists():
        return fallback

    try:
        raw = path.read_text(encoding="utf-8").strip()
    except OSError as e:
        raise JsonReadError(path=path, message="Failed to read file", cause=e) from e

    if not raw:
        return fallback

    try:
        data = json.loads(raw)
    except ValueError as e:
        raise JsonReadError(path=path, message="Invalid JSON", cause=e) from e

    if not isinstance(data, dict):
        raise JsonReadError(path=path, message="JSON root must be an object/dict")
    return data


def atomic_write_json(path: Path, data: Dict[str, Any], *, backup: bool = True) -> None:
    """
    Write `data` next to `path` as a temp file, fsync it, then os.replace it in.
    With `backup`, an existing file is first copied to `<name>.bak`.

    The original file is left untouched if any step fails.
    """
    if not isinstance(data, dict):
        raise JsonWriteError(path=path, message="atomic_write_json expects `data` to be a dict")

    ensure_dir(path.parent)
    tmp_path = path.parent / f".{path.name}.{uuid4().hex}.tmp"
    bak_path = path.with_suffix(path.suffix + ".bak")

    try:
        payload = json.dumps(data, ensure_ascii=False, indent=2, sort_keys=True)
        with open(tmp_path, "wb") as f:
            f.write(payload.encode("utf-8"))
            f.flush()
            os.fsync(f.fileno())

        if backup and path.exists():
            shutil.copy2(path, bak_path)

        os.replace(tmp_path, path)
    except (OSError, TypeError, ValueError) as e:
        raise JsonWriteError(path=path, message="Failed to write JSON atomically", cause=e) from e
    finally:
        try:
            tmp_path.unlink(missing_ok=True)
        except OSError:
            log.warning("could not remove temp file %s", tmp_path)
