from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(slots=True)
class TimeoutConfig:
    """Per-probe timeouts with env overrides.

    ``basic_timeout_ms`` bounds endpoint probes of the basic and hosting
    presets, ``comprehensive_timeout_ms`` those of the comprehensive preset.
    """
    basic_timeout_ms: int
    comprehensive_timeout_ms: int
    dns_timeout_ms: int
    port_timeout_ms: int

    @classmethod
    def from_env(cls) -> "TimeoutConfig":
        """Build TimeoutConfig from environment variables."""
        def _int(name: str, default: int) -> int:
            try:
                value = int(os.getenv(name, str(default)))
            except ValueError:
                return default
            return value if value > 0 else default

        def _seconds(name: str, default_s: int) -> int:
            return _int(name, default_s) * 1000

        return cls(
            basic_timeout_ms=_seconds("BASIC_TIMEOUT_S", 5),
            comprehensive_timeout_ms=_seconds("COMPREHENSIVE_TIMEOUT_S", 10),
            dns_timeout_ms=_seconds("DIAGNOSTIC_TIMEOUT_S", 5),
            port_timeout_ms=_seconds("DIAGNOSTIC_TIMEOUT_S", 5),
        )
