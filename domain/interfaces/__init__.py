"""Domain interfaces."""
from .probe import IProbe

__all__ = [
    'IProbe',
]
