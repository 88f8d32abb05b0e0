"""Structured logging helpers."""
from .config import bootstrap_logging, shutdown_logging
from .context import context, get_context, new_run_id
from .levels import LogLevel
from .logger import StructuredLogger, get_logger

__all__ = [
    "bootstrap_logging",
    "shutdown_logging",
    "context",
    "get_context",
    "new_run_id",
    "LogLevel",
    "StructuredLogger",
    "get_logger",
]
