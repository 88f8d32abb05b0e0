"""Aggregate report of one validation run."""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from .endpoint_result import ConnectivityCheck, EndpointResult
from ..enums import OverallStatus

HEALTHY_RATE = 100
DEGRADED_MIN_RATE = 50


def compute_success_rate(successful: int, total: int) -> int:
    """Integer percentage, rounded half-up (2/8 -> 25, 1/8 -> 13).

    Integer arithmetic avoids both float error and Python's banker's rounding.
    An empty run has a rate of 0.
    """
    if total <= 0:
        return 0
    return (200 * successful + total) // (2 * total)


def classify_success_rate(rate: int) -> OverallStatus:
    """100 -> HEALTHY, [50, 100) -> DEGRADED, below 50 -> UNHEALTHY."""
    if rate >= HEALTHY_RATE:
        return OverallStatus.HEALTHY
    if rate >= DEGRADED_MIN_RATE:
        return OverallStatus.DEGRADED
    return OverallStatus.UNHEALTHY


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class AggregateReport:
    """Endpoint results of one run plus the derived summary.

    When ``connectivity`` is present and not reachable the run is FAILED and
    ``results`` is empty: the endpoint list was never probed.
    """

    base_url: str
    results: list[EndpointResult] = field(default_factory=list)
    connectivity: Optional[ConnectivityCheck] = None
    started_at: datetime = field(default_factory=_utcnow)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def successful(self) -> int:
        return sum(1 for r in self.results if r.success)

    @property
    def failed(self) -> int:
        return self.total - self.successful

    @property
    def success_rate(self) -> int:
        return compute_success_rate(self.successful, self.total)

    @property
    def precheck_failed(self) -> bool:
        return self.connectivity is not None and not self.connectivity.reachable

    @property
    def overall_status(self) -> OverallStatus:
        if self.precheck_failed:
            return OverallStatus.FAILED
        return classify_success_rate(self.success_rate)

    @property
    def exit_code(self) -> int:
        return self.overall_status.exit_code

    def to_dict(self) -> dict:
        """JSON-ready view; ``detailed_validation`` is None for FAILED runs."""
        detailed = None
        if not self.precheck_failed:
            detailed = {
                'endpoints': [r.to_dict() for r in self.results],
                'summary': {
                    'total': self.total,
                    'successful': self.successful,
                    'failed': self.failed,
                    'success_rate': self.success_rate,
                },
            }
        return {
            'url': self.base_url,
            'timestamp': self.started_at.isoformat(),
            'basic_connectivity': self.connectivity.to_dict() if self.connectivity else None,
            'detailed_validation': detailed,
            'overall_status': self.overall_status.value,
            'exit_code': self.exit_code,
        }
