from __future__ import annotations

import asyncio
import socket
import time
from typing import Dict, Iterator, Optional

import httpx

from core.logging.logger import StructuredLogger
from domain.entities import ProbeOutcome, is_success_status
from domain.enums import ErrorKind
from domain.interfaces import IProbe

_HOST_NOT_FOUND_HINTS = (
    "name or service not known",
    "nodename nor servname",
    "getaddrinfo failed",
    "temporary failure in name resolution",
    "no address associated",
)


def _causes(exc: BaseException) -> Iterator[BaseException]:
    seen: set[int] = set()
    current: Optional[BaseException] = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__ or current.__context__


def classify_transport_error(exc: BaseException) -> ErrorKind:
    """Map an httpx/OS exception to the ErrorKind printed in reports.

    httpx wraps socket errors, so the cause chain is checked for the OS
    exception first and the messages second.
    """
    chain = list(_causes(exc))
    for e in chain:
        if isinstance(e, (httpx.TimeoutException, asyncio.TimeoutError, TimeoutError)):
            return ErrorKind.TIMED_OUT
        if isinstance(e, ConnectionRefusedError):
            return ErrorKind.CONNECTION_REFUSED
        if isinstance(e, ConnectionResetError):
            return ErrorKind.CONNECTION_RESET
        if isinstance(e, socket.gaierror):
            return ErrorKind.HOST_NOT_FOUND
    for e in chain:
        msg = str(e).lower()
        if "refused" in msg:
            return ErrorKind.CONNECTION_REFUSED
        if "reset" in msg or "server disconnected" in msg:
            return ErrorKind.CONNECTION_RESET
        if any(hint in msg for hint in _HOST_NOT_FOUND_HINTS):
            return ErrorKind.HOST_NOT_FOUND
        if "timed out" in msg:
            return ErrorKind.TIMED_OUT
    return ErrorKind.OTHER


class HTTPChecker(IProbe):
    """Single GET per call over a fresh ``httpx.AsyncClient``.

    Redirects are not followed; a 3xx is reported as-is. ``transport`` lets
    callers route requests to an in-process app or a mock.
    """

    def __init__(
        self,
        logger: StructuredLogger,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.logger = logger
        self.headers = headers or {}
        self.transport = transport

    async def probe(self, url: str, timeout_ms: int) -> ProbeOutcome:
        extra = {"url": url}
        self.logger.trace(lambda: "http-probe-start", extra=extra)
        timeout_s = timeout_ms / 1000.0
        start = time.perf_counter()
        try:
            async with httpx.AsyncClient(
                headers=self.headers,
                timeout=httpx.Timeout(timeout_s),
                follow_redirects=False,
                transport=self.transport,
            ) as client:
                # httpx timeouts are per phase; wait_for caps the whole attempt
                resp = await asyncio.wait_for(client.get(url), timeout=timeout_s)
        except (httpx.HTTPError, OSError, asyncio.TimeoutError) as e:
            dur_ms = self._elapsed_ms(start)
            kind = classify_transport_error(e)
            message = str(e) or type(e).__name__
            self.logger.error(
                lambda: "http-probe-error",
                extra={**extra, "latency_ms": dur_ms, "error_kind": kind.value},
            )
            return ProbeOutcome.failure(kind, dur_ms, message)

        dur_ms = self._elapsed_ms(start)
        status = resp.status_code
        if is_success_status(status):
            self.logger.success(lambda: "http-probe-ok", extra={**extra, "latency_ms": dur_ms, "status": status})
        else:
            self.logger.warning(lambda: "http-probe-not-ok", extra={**extra, "latency_ms": dur_ms, "status": status})
        return ProbeOutcome.response(status, dur_ms)

    @staticmethod
    def _elapsed_ms(start: float) -> int:
        return int((time.perf_counter() - start) * 1000.0)
