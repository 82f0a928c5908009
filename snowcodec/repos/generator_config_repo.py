from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from snowcodec.io.json_store import atomic_write_json, ensure_dir, read_json
from snowcodec.migrations.generator_config_json import migrate_generator_config_json
from snowcodec.models.generator_config import GeneratorConfig

log = logging.getLogger(__name__)


class GeneratorConfigRepo:
    """
    Manages <app_data>/snowflake.json: the epoch, worker id and process id
    a generator is built from.

    Epoch policy:
    - An epoch already on disk is never replaced (changing it would reorder
      every previously issued id).
    - A missing epoch is filled from `default_epoch_ms` when one is given.
    """

    FILE_NAME = "snowflake.json"

    def __init__(self, app_data_dir: Path) -> None:
        self._app_data_dir = app_data_dir
        ensure_dir(self._app_data_dir)

    @property
    def path(self) -> Path:
        return self._app_data_dir / self.FILE_NAME

    def load_or_create(self, *, default_epoch_ms: Optional[int] = None) -> GeneratorConfig:
        existed = self.path.exists()
        data = read_json(self.path, default={})

        mig = migrate_generator_config_json(data)
        cfg = GeneratorConfig.from_dict(mig.data)
        changed = bool(mig.changed)
        if mig.notes:
            log.info("snowflake config migrated: %s", mig.notes)

        if cfg.epoch_ms is None and default_epoch_ms is not None:
            cfg.epoch_ms = int(default_epoch_ms)
            changed = True

        if (not existed) or changed:
            # backup only when rewriting an existing file
            self.save(cfg, backup=existed)
            log.info("snowflake config written: %s", self.path)

        return cfg

    def save(self, cfg: GeneratorConfig, *, backup: bool = True) -> None:
        atomic_write_json(self.path, cfg.to_dict(), backup=backup)
