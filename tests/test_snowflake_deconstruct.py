# tests/test_snowflake_deconstruct.py
from __future__ import annotations

from datetime import datetime, timezone

import pytest

from snowcodec import ConfigurationError, DeconstructedSnowflake, Snowflake

from conftest import FROZEN_NOW, SNOWFLAKE_EPOCH


def test_deconstruct_known_snowflake() -> None:
    sf = Snowflake().set_epoch(SNOWFLAKE_EPOCH)

    parts = sf.deconstruct(55067856077201608)

    assert parts == DeconstructedSnowflake(
        worker_id=3,
        process_id=2,
        increment=200,
        timestamp=FROZEN_NOW,
    )


def test_deconstruct_accepts_string_ids() -> None:
    sf = Snowflake().set_epoch(SNOWFLAKE_EPOCH)
    assert sf.deconstruct("55067856077201608") == sf.deconstruct(55067856077201608)


def test_deconstruct_does_not_touch_counter(frozen_now: int) -> None:
    sf = Snowflake().set_epoch(SNOWFLAKE_EPOCH)
    sf.deconstruct(55067856077201608)
    assert sf.deconstruct(sf.generate()).increment == 0


def test_deconstruct_without_epoch_raises() -> None:
    with pytest.raises(ConfigurationError):
        Snowflake().deconstruct(55067856077201608)


@pytest.mark.parametrize(
    "worker_id, process_id, increment, timestamp",
    [
        (0, 0, 0, SNOWFLAKE_EPOCH),
        (31, 31, 4095, FROZEN_NOW),
        (3, 2, 200, FROZEN_NOW),
        (17, 0, 1, SNOWFLAKE_EPOCH + 1),
    ],
)
def test_generate_then_deconstruct_roundtrip(worker_id: int, process_id: int, increment: int, timestamp: int) -> None:
    sf = Snowflake().set_epoch(SNOWFLAKE_EPOCH)

    value = sf.generate(worker_id=worker_id, process_id=process_id, increment=increment, timestamp=timestamp)

    assert sf.deconstruct(value).to_dict() == {
        "worker_id": worker_id,
        "process_id": process_id,
        "increment": increment,
        "timestamp": timestamp,
    }


def test_deconstructed_datetime_is_utc() -> None:
    parts = Snowflake().set_epoch(SNOWFLAKE_EPOCH).deconstruct(55067856077201608)
    assert parts.datetime == datetime(2022, 6, 1, 23, 0, tzinfo=timezone.utc)
