"""Aggregate status of one validation run."""
from enum import Enum


class OverallStatus(Enum):
    """Single classification of a validation run.

    HEALTHY, DEGRADED and UNHEALTHY are derived from the success rate.
    FAILED means the base URL itself could not be reached.
    """

    HEALTHY = "HEALTHY"
    DEGRADED = "DEGRADED"
    UNHEALTHY = "UNHEALTHY"
    FAILED = "FAILED"

    @property
    def exit_code(self) -> int:
        """Process exit code: 0 only for HEALTHY."""
        return 0 if self is OverallStatus.HEALTHY else 1

    @property
    def symbol(self) -> str:
        """Get the status marker used in the summary block."""
        symbols = {
            "HEALTHY": "🟢",
            "DEGRADED": "🟡",
            "UNHEALTHY": "🔴",
            "FAILED": "❌",
        }
        return symbols[self.value]
