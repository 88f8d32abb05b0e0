"""Outcome of one HTTP attempt."""
from dataclasses import dataclass
from typing import Optional

from ..enums import ErrorKind


@dataclass(frozen=True)
class ProbeOutcome:
    """Result of a single probe.

    Exactly one of ``status_code`` and ``error_kind`` is set.
    ``response_time_ms`` is recorded on failures too.
    """

    response_time_ms: int
    status_code: Optional[int] = None
    error_kind: Optional[ErrorKind] = None
    error: Optional[str] = None  # transport error message, display only

    def __post_init__(self) -> None:
        if (self.status_code is None) == (self.error_kind is None):
            raise ValueError("exactly one of status_code or error_kind must be set")
        if self.response_time_ms < 0:
            raise ValueError("response_time_ms must be >= 0")

    @classmethod
    def response(cls, status_code: int, response_time_ms: int) -> 'ProbeOutcome':
        return cls(response_time_ms=response_time_ms, status_code=status_code)

    @classmethod
    def failure(cls, kind: ErrorKind, response_time_ms: int, error: Optional[str] = None) -> 'ProbeOutcome':
        return cls(response_time_ms=response_time_ms, error_kind=kind, error=error)

    @property
    def responded(self) -> bool:
        """True when any HTTP response arrived, whatever its status."""
        return self.status_code is not None

    @property
    def label(self) -> str:
        """HTTP code or error kind, as printed in report lines."""
        if self.status_code is not None:
            return f"HTTP {self.status_code}"
        return self.error_kind.value

    def to_dict(self) -> dict:
        return {
            'status_code': self.status_code,
            'error_kind': self.error_kind.value if self.error_kind else None,
            'error': self.error,
            'response_time_ms': self.response_time_ms,
        }
