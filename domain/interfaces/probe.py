"""Probe capability consumed by the aggregator."""
from abc import ABC, abstractmethod

from ..entities import ProbeOutcome


class IProbe(ABC):
    """Issues one GET against a URL, bounded by a timeout.

    Implementations never raise for transport problems; they map them to
    ``ProbeOutcome.error_kind`` and always fill ``response_time_ms``.
    """

    @abstractmethod
    async def probe(self, url: str, timeout_ms: int) -> ProbeOutcome:
        """Probe ``url`` once."""
        pass
