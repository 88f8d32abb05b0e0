"""Test doubles shared by the test modules."""
from __future__ import annotations

import asyncio
from typing import Dict, List, Optional

from domain.entities import DNSCheckResult, PortCheckResult, ProbeOutcome
from domain.enums import ErrorKind


class FakeProbe:
    """Returns canned outcomes per URL and records every call."""

    def __init__(self, outcomes: Dict[str, ProbeOutcome], delays: Optional[Dict[str, float]] = None) -> None:
        self.outcomes = outcomes
        self.delays = delays or {}
        self.calls: List[str] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def probe(self, url: str, timeout_ms: int) -> ProbeOutcome:
        self.calls.append(url)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delays.get(url, 0))
        finally:
            self.in_flight -= 1
        return self.outcomes[url]


class StubDNSChecker:
    def __init__(self, success: bool = True) -> None:
        self.success = success
        self.hosts: List[str] = []

    async def check(self, host: str) -> DNSCheckResult:
        self.hosts.append(host)
        if self.success:
            return DNSCheckResult(host=host, success=True, latency_ms=1, addresses=["127.0.0.1"])
        return DNSCheckResult(host=host, success=False, latency_ms=1, error="nxdomain")


class StubPortChecker:
    def __init__(self, success: bool = True) -> None:
        self.success = success

    async def check(self, host: str, port: int) -> PortCheckResult:
        if self.success:
            return PortCheckResult(host=host, port=port, success=True, latency_ms=1)
        return PortCheckResult(host=host, port=port, success=False, latency_ms=1, error="refused")


def ok(ms: int = 5) -> ProbeOutcome:
    return ProbeOutcome.response(200, ms)


def status(code: int, ms: int = 5) -> ProbeOutcome:
    return ProbeOutcome.response(code, ms)


def fail(kind: ErrorKind, ms: int = 5) -> ProbeOutcome:
    return ProbeOutcome.failure(kind, ms, kind.description)
