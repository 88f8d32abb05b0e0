from .timeout_config import TimeoutConfig
from .http_checker import HTTPChecker, classify_transport_error
from .dns_checker import DNSChecker
from .port_checker import PortChecker
from .endpoints import PRESETS, parse_endpoints, preset_endpoints
from .aggregator import HealthAggregator, join_url, validate_base_url

__all__ = [
    "TimeoutConfig",
    "HTTPChecker",
    "classify_transport_error",
    "DNSChecker",
    "PortChecker",
    "PRESETS",
    "parse_endpoints",
    "preset_endpoints",
    "HealthAggregator",
    "join_url",
    "validate_base_url",
]
