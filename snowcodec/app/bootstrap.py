from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from snowcodec.idgen.snowflake import Snowflake, TimeLike, to_ms
from snowcodec.logging_context import log_context
from snowcodec.repos.generator_config_repo import GeneratorConfigRepo

log = logging.getLogger(__name__)


def open_generator(
    app_data_dir: Path,
    *,
    default_epoch: Optional[TimeLike] = None,
) -> Snowflake:
    """
    Load (or create) <app_data>/snowflake.json and build a codec from it.

    `default_epoch` is only used when the file has no epoch yet. Without either,
    the returned codec raises ConfigurationError on first use.
    """
    repo = GeneratorConfigRepo(app_data_dir)
    default_ms = None if default_epoch is None else to_ms(default_epoch)

    with log_context(action="open_generator"):
        cfg = repo.load_or_create(default_epoch_ms=default_ms)
        if cfg.epoch_ms is None:
            log.warning("snowflake epoch not configured in %s", repo.path)
        log.info(
            "snowflake generator ready (worker=%s process=%s epoch=%s)",
            cfg.worker_id,
            cfg.process_id,
            cfg.epoch_ms,
        )
    return Snowflake.from_config(cfg)
