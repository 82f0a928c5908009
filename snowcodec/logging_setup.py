# snowcodec/logging_setup.py
from __future__ import annotations

import logging
import logging.handlers
import queue
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List

from snowcodec.io.json_store import ensure_dir
from snowcodec.logging_context import action_var, corr_id_var, log_context, worker_var

LOG_FORMAT = (
    "%(asctime)s %(levelname)s "
    "[pid=%(process)d tid=%(thread)d] "
    "%(name)s:%(funcName)s:%(lineno)d "
    "corr=%(corr_id)s worker=%(worker)s action=%(action)s - %(message)s"
)


class ContextFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        # formatter references these fields, so they must always exist.
        # Records coming off the queue already carry the producer thread's values.
        for attr, var in (("corr_id", corr_id_var), ("worker", worker_var), ("action", action_var)):
            if not hasattr(record, attr):
                setattr(record, attr, var.get())
        return True


@dataclass
class LoggingRuntime:
    listener: logging.handlers.QueueListener

    def stop(self) -> None:
        self.listener.stop()
        for h in self.listener.handlers:
            h.close()


def setup_logging(
    *,
    app_data_dir: Path,
    level: str = "INFO",
    keep_days_app: int = 14,
    keep_days_error: int = 30,
    console: bool = False,
) -> LoggingRuntime:
    """
    Route the root logger through a queue to rotating files under
    <app_data>/logs (app.log, error.log) and optionally stderr.

    Call `stop()` on the returned runtime to flush and join the listener.
    """
    logs_dir = app_data_dir / "logs"
    ensure_dir(logs_dir)

    log_q: "queue.Queue[logging.LogRecord]" = queue.Queue(maxsize=20_000)
    formatter = logging.Formatter(fmt=LOG_FORMAT)

    def _file_handler(name: str, handler_level: int, keep_days: int) -> logging.Handler:
        fh = logging.handlers.TimedRotatingFileHandler(
            filename=str(logs_dir / name),
            when="midnight",
            backupCount=int(keep_days),
            encoding="utf-8",
        )
        fh.setLevel(handler_level)
        fh.setFormatter(formatter)
        fh.addFilter(ContextFilter())
        return fh

    handlers: List[logging.Handler] = [
        _file_handler("app.log", logging.INFO, keep_days_app),
        _file_handler("error.log", logging.ERROR, keep_days_error),
    ]

    if console:
        ch = logging.StreamHandler(stream=sys.stderr)
        ch.setLevel(logging.DEBUG)
        ch.setFormatter(formatter)
        ch.addFilter(ContextFilter())
        handlers.append(ch)

    # context is captured on the calling thread, before the record is queued
    qh = logging.handlers.QueueHandler(log_q)
    qh.setLevel(logging.DEBUG)
    qh.addFilter(ContextFilter())

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()
    root.addHandler(qh)

    listener = logging.handlers.QueueListener(log_q, *handlers, respect_handler_level=True)
    listener.start()

    with log_context(action="boot"):
        logging.getLogger(__name__).info("logging initialized")
    return LoggingRuntime(listener=listener)
