from __future__ import annotations

import contextvars
import uuid
from typing import Any, Dict

_run_context: contextvars.ContextVar[Dict[str, Any]] = contextvars.ContextVar("run_context", default={})


def new_run_id() -> str:
    """Short id used to correlate all log lines of one validation run."""
    return uuid.uuid4().hex[:12]


def get_context() -> Dict[str, Any]:
    return dict(_run_context.get())


class context(object):
    """Temporarily bind values, e.g. ``with context(run_id=..., target=url):``."""

    def __init__(self, **values: Any) -> None:
        self._values = values
        self._token: contextvars.Token | None = None

    def __enter__(self) -> Dict[str, Any]:
        current = get_context()
        current.update({k: v for k, v in self._values.items() if v is not None})
        self._token = _run_context.set(current)
        return current

    def __exit__(self, exc_type, exc, tb):
        if self._token is not None:
            _run_context.reset(self._token)
            self._token = None
        return False
