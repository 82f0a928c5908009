# tests/test_generator_config_repo.py
from __future__ import annotations

import json
from pathlib import Path

import pytest

from snowcodec import ConfigurationError
from snowcodec.app.bootstrap import open_generator
from snowcodec.io.json_store import JsonReadError
from snowcodec.migrations.generator_config_json import migrate_generator_config_json
from snowcodec.migrations.types import MigrationError
from snowcodec.models.generator_config import GeneratorConfig
from snowcodec.repos.generator_config_repo import GeneratorConfigRepo

from conftest import FROZEN_NOW, SNOWFLAKE_EPOCH


def test_first_run_writes_defaults(tmp_path: Path) -> None:
    repo = GeneratorConfigRepo(tmp_path)

    cfg = repo.load_or_create(default_epoch_ms=SNOWFLAKE_EPOCH)

    assert cfg == GeneratorConfig(schema_version=1, epoch_ms=SNOWFLAKE_EPOCH, worker_id=0, process_id=1)
    data = json.loads(repo.path.read_text(encoding="utf-8"))
    assert data == {"schema_version": 1, "epoch_ms": SNOWFLAKE_EPOCH, "worker_id": 0, "process_id": 1}
    # no .bak on first creation
    assert not repo.path.with_suffix(".json.bak").exists()


def test_existing_epoch_is_never_replaced(tmp_path: Path) -> None:
    repo = GeneratorConfigRepo(tmp_path)
    repo.save(GeneratorConfig(epoch_ms=123, worker_id=5, process_id=7), backup=False)

    cfg = repo.load_or_create(default_epoch_ms=SNOWFLAKE_EPOCH)

    assert (cfg.epoch_ms, cfg.worker_id, cfg.process_id) == (123, 5, 7)


def test_partial_file_is_normalized_with_backup(tmp_path: Path) -> None:
    repo = GeneratorConfigRepo(tmp_path)
    repo.path.write_text(json.dumps({"epoch_ms": SNOWFLAKE_EPOCH}), encoding="utf-8")

    cfg = repo.load_or_create()

    assert cfg.worker_id == 0
    assert cfg.process_id == 1
    data = json.loads(repo.path.read_text(encoding="utf-8"))
    assert data["schema_version"] == 1
    assert repo.path.with_suffix(".json.bak").exists()


def test_newer_schema_is_rejected(tmp_path: Path) -> None:
    repo = GeneratorConfigRepo(tmp_path)
    repo.path.write_text(json.dumps({"schema_version": 99}), encoding="utf-8")

    with pytest.raises(MigrationError):
        repo.load_or_create()


def test_invalid_json_raises(tmp_path: Path) -> None:
    repo = GeneratorConfigRepo(tmp_path)
    repo.path.write_text("{not json", encoding="utf-8")

    with pytest.raises(JsonReadError) as ei:
        repo.load_or_create()
    assert ei.value.path == repo.path


def test_from_dict_is_lenient() -> None:
    cfg = GeneratorConfig.from_dict({"epoch_ms": "1640995200000", "worker_id": "x", "process_id": -3})
    assert cfg.epoch_ms == SNOWFLAKE_EPOCH
    assert cfg.worker_id == 0
    assert cfg.process_id == 1


def test_open_generator_builds_configured_codec(tmp_path: Path, frozen_now: int) -> None:
    sf = open_generator(tmp_path, default_epoch=SNOWFLAKE_EPOCH)

    assert sf.epoch == SNOWFLAKE_EPOCH
    assert sf.generate() == 55067856076804096
    assert sf.deconstruct(sf.generate()).timestamp == FROZEN_NOW


def test_open_generator_without_epoch_fails_on_use(tmp_path: Path) -> None:
    sf = open_generator(tmp_path)

    with pytest.raises(ConfigurationError):
        sf.generate()


def test_migration_reports_what_it_filled() -> None:
    mig = migrate_generator_config_json({"epoch_ms": SNOWFLAKE_EPOCH})

    assert mig.changed
    assert mig.notes == "schema_version set to 1; worker_id defaulted to 0; process_id defaulted to 1"

    again = migrate_generator_config_json(dict(mig.data))
    assert not again.changed
    assert again.notes == ""
