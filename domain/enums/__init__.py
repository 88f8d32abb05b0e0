"""Domain enumerations."""
from .error_kind import ErrorKind
from .overall_status import OverallStatus

__all__ = [
    'ErrorKind',
    'OverallStatus',
]
