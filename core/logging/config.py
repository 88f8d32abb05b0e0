from __future__ import annotations

import logging
import os
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path
from queue import Queue
from typing import Optional

from .formatter import ConsoleFormatter, ContextFilter, JSONFormatter
from .levels import register_levels, to_level

_listener: QueueListener | None = None


def bootstrap_logging(
    *,
    service: str = "validator",
    level: str | int | None = None,
    log_dir: Optional[Path] = None,
    log_file_name: str = "validator.jsonl",
    max_bytes: int = 2_000_000,
    backup_count: int = 3,
) -> None:
    """Configure the root logger.

    Console output is opt-in (``LOG_CONSOLE=true``) because the CLI prints its
    own report to stdout; the JSON-lines file under ``log_dir`` is written
    through a queue so probes never block on disk I/O.
    """
    global _listener
    shutdown_logging()
    register_levels()
    root = logging.getLogger()
    root.handlers.clear()
    lvl = to_level(level or os.getenv("LOG_LEVEL", "INFO"))
    root.setLevel(lvl)

    if os.getenv("LOG_CONSOLE", "false").strip().lower() == "true":
        console = logging.StreamHandler()
        console_level = os.getenv("LOG_CONSOLE_LEVEL", "")
        console.setLevel(to_level(console_level) if console_level else lvl)
        console.setFormatter(ConsoleFormatter())
        console.addFilter(ContextFilter())
        root.addHandler(console)

    if log_dir:
        try:
            log_dir.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                str(log_dir / log_file_name), maxBytes=max_bytes, backupCount=backup_count
            )
        except OSError as exc:
            logging.basicConfig(level=lvl)
            logging.getLogger(__name__).warning("file logging disabled: %s", exc)
            return
        file_handler.setLevel(lvl)
        file_handler.setFormatter(JSONFormatter())
        q: Queue[logging.LogRecord] = Queue(-1)
        queue_handler = QueueHandler(q)
        queue_handler.addFilter(ContextFilter())
        root.addHandler(queue_handler)
        _listener = QueueListener(q, file_handler, respect_handler_level=True)
        _listener.start()

    logging.getLogger(__name__).debug("logging ready", extra={"service": service})


def shutdown_logging() -> None:
    """Flush and stop the background file writer, if any."""
    global _listener
    if _listener is not None:
        _listener.stop()
        _listener = None
