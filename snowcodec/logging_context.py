# snowcodec/logging_context.py
from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, List, Optional, Tuple
from uuid import uuid4

corr_id_var: ContextVar[str] = ContextVar("corr_id", default="-")
worker_var: ContextVar[str] = ContextVar("worker", default="-")
action_var: ContextVar[str] = ContextVar("action", default="-")


def new_corr_id() -> str:
    return uuid4().hex[:12]


@contextmanager
def log_context(
    *,
    corr_id: Optional[str] = None,
    worker: Optional[str] = None,
    action: Optional[str] = None,
) -> Iterator[None]:
    tokens: List[Tuple[ContextVar[str], object]] = []
    try:
        if corr_id is not None:
            tokens.append((corr_id_var, corr_id_var.set(corr_id)))
        if worker is not None:
            tokens.append((worker_var, worker_var.set(worker)))
        if action is not None:
            tokens.append((action_var, action_var.set(action)))
        yield
    finally:
        for var, tok in reversed(tokens):
            var.reset(tok)  # type: ignore[arg-type]
