"""Application services root exports."""
from .health import DNSChecker, HealthAggregator, HTTPChecker, PortChecker, TimeoutConfig

__all__ = [
    "DNSChecker",
    "HealthAggregator",
    "HTTPChecker",
    "PortChecker",
    "TimeoutConfig",
]
