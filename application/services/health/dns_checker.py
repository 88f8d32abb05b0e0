from __future__ import annotations

import asyncio
import socket
import time

from core.logging.logger import StructuredLogger
from domain.entities import DNSCheckResult
from .timeout_config import TimeoutConfig


class DNSChecker:
    """DNS resolution check for the target host."""

    def __init__(self, timeout: TimeoutConfig, logger: StructuredLogger) -> None:
        self.timeout = timeout
        self.logger = logger

    async def check(self, host: str) -> DNSCheckResult:
        """Resolve a hostname and measure latency."""
        start = time.perf_counter()
        self.logger.info(lambda: "dns-check-start", extra={"host": host})
        try:
            infos = await asyncio.wait_for(
                asyncio.to_thread(socket.getaddrinfo, host, None),
                timeout=self.timeout.dns_timeout_ms / 1000.0,
            )
        except asyncio.TimeoutError:
            latency_ms = self._elapsed_ms(start)
            self.logger.error(lambda: "dns-timeout", extra={"host": host, "latency_ms": latency_ms})
            return DNSCheckResult(host=host, success=False, latency_ms=latency_ms, error="timeout")
        except socket.gaierror as e:
            latency_ms = self._elapsed_ms(start)
            err = "nxdomain" if e.errno == socket.EAI_NONAME else "gaierror"
            self.logger.error(lambda: f"dns-error {err}", extra={"host": host, "latency_ms": latency_ms})
            return DNSCheckResult(host=host, success=False, latency_ms=latency_ms, error=err)
        except (OSError, UnicodeError) as e:
            latency_ms = self._elapsed_ms(start)
            self.logger.error(lambda: f"dns-exception {e}", extra={"host": host, "latency_ms": latency_ms})
            return DNSCheckResult(host=host, success=False, latency_ms=latency_ms, error=str(e))

        latency_ms = self._elapsed_ms(start)
        addresses = list(dict.fromkeys(info[4][0] for info in infos))
        self.logger.success(lambda: "dns-check-ok", extra={"host": host, "latency_ms": latency_ms})
        return DNSCheckResult(host=host, success=True, latency_ms=latency_ms, addresses=addresses)

    @staticmethod
    def _elapsed_ms(start: float) -> int:
        return int((time.perf_counter() - start) * 1000.0)
