from __future__ import annotations

import asyncio
import time

from core.logging.logger import StructuredLogger
from domain.entities import PortCheckResult
from .timeout_config import TimeoutConfig


class PortChecker:
    """TCP connect check: is anything listening on host:port?"""

    def __init__(self, timeout: TimeoutConfig, logger: StructuredLogger) -> None:
        self.timeout = timeout
        self.logger = logger

    async def check(self, host: str, port: int) -> PortCheckResult:
        start = time.perf_counter()
        extra = {"host": host, "port": port}
        self.logger.info(lambda: "port-check-start", extra=extra)
        try:
            _, writer = await asyncio.wait_for(
                asyncio.open_connection(host, port),
                timeout=self.timeout.port_timeout_ms / 1000.0,
            )
        except asyncio.TimeoutError:
            latency_ms = self._elapsed_ms(start)
            self.logger.error(lambda: "port-timeout", extra={**extra, "latency_ms": latency_ms})
            return PortCheckResult(host=host, port=port, success=False, latency_ms=latency_ms, error="timeout")
        except OSError as e:
            latency_ms = self._elapsed_ms(start)
            err = "refused" if isinstance(e, ConnectionRefusedError) else (str(e) or type(e).__name__)
            self.logger.error(lambda: f"port-closed {err}", extra={**extra, "latency_ms": latency_ms})
            return PortCheckResult(host=host, port=port, success=False, latency_ms=latency_ms, error=err)

        writer.close()
        try:
            await writer.wait_closed()
        except OSError:
            pass
        latency_ms = self._elapsed_ms(start)
        self.logger.success(lambda: "port-open", extra={**extra, "latency_ms": latency_ms})
        return PortCheckResult(host=host, port=port, success=True, latency_ms=latency_ms)

    @staticmethod
    def _elapsed_ms(start: float) -> int:
        return int((time.perf_counter() - start) * 1000.0)
