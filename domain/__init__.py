"""Domain layer - Entities, enums, interfaces and errors."""
from .entities import (
    AggregateReport, ConnectivityCheck, DiagnosticsReport, DNSCheckResult,
    EndpointResult, EndpointSpec, PortCheckResult, ProbeOutcome,
)
from .enums import ErrorKind, OverallStatus
from .errors import ValidationConfigError
from .interfaces import IProbe

__all__ = [
    # Entities
    'AggregateReport',
    'ConnectivityCheck',
    'DiagnosticsReport',
    'DNSCheckResult',
    'EndpointResult',
    'EndpointSpec',
    'PortCheckResult',
    'ProbeOutcome',
    # Enums
    'ErrorKind',
    'OverallStatus',
    # Errors
    'ValidationConfigError',
    # Interfaces
    'IProbe',
]
