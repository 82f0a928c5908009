# tests/conftest.py
from __future__ import annotations

import sys
from pathlib import Path

import pytest

# project root = parent of tests/
ROOT = Path(__file__).resolve().parents[1]

# make `import snowcodec` work without installing the package
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)

# 2022-01-01T00:00:00.000Z
SNOWFLAKE_EPOCH = 1640995200000
# 2022-06-01T23:00:00.000Z
FROZEN_NOW = 1654124400000


@pytest.fixture
def frozen_now(monkeypatch: pytest.MonkeyPatch) -> int:
    monkeypatch.setattr("snowcodec.idgen.snowflake._now_ms", lambda: FROZEN_NOW)
    return FROZEN_NOW
