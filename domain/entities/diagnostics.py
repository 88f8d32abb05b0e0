"""Network diagnostics results."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(slots=True)
class DNSCheckResult:
    """DNS resolution outcome."""
    host: str
    success: bool
    latency_ms: Optional[int] = None
    error: Optional[str] = None
    addresses: list[str] = field(default_factory=list)


@dataclass(slots=True)
class PortCheckResult:
    """TCP connect outcome."""
    host: str
    port: int
    success: bool
    latency_ms: Optional[int] = None
    error: Optional[str] = None


@dataclass(slots=True)
class DiagnosticsReport:
    """DNS + port diagnostics for the target host."""
    host: str
    port: int
    dns: DNSCheckResult
    port_check: PortCheckResult

    @property
    def ok(self) -> bool:
        return self.dns.success and self.port_check.success

    def to_dict(self) -> Dict[str, Any]:
        return {
            "host": self.host,
            "port": self.port,
            "dns": {
                "success": self.dns.success,
                "latency_ms": self.dns.latency_ms,
                "error": self.dns.error,
                "addresses": list(self.dns.addresses),
            },
            "port_check": {
                "success": self.port_check.success,
                "latency_ms": self.port_check.latency_ms,
                "error": self.port_check.error,
            },
        }
