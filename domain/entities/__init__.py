"""Domain entities."""
from .endpoint import EndpointSpec
from .probe_outcome import ProbeOutcome
from .endpoint_result import ConnectivityCheck, EndpointResult, is_success_status
from .report import AggregateReport, classify_success_rate, compute_success_rate
from .diagnostics import DiagnosticsReport, DNSCheckResult, PortCheckResult

__all__ = [
    'EndpointSpec',
    'ProbeOutcome',
    'ConnectivityCheck',
    'EndpointResult',
    'is_success_status',
    'AggregateReport',
    'classify_success_rate',
    'compute_success_rate',
    'DiagnosticsReport',
    'DNSCheckResult',
    'PortCheckResult',
]
