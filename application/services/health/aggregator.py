from __future__ import annotations

import asyncio
import time
from typing import Sequence

import httpx

from domain.entities import (
    AggregateReport,
    ConnectivityCheck,
    EndpointResult,
    EndpointSpec,
    ProbeOutcome,
    classify_success_rate,
    compute_success_rate,
)
from domain.enums import ErrorKind
from domain.errors import ValidationConfigError
from domain.interfaces import IProbe

__all__ = [
    "HealthAggregator",
    "classify_success_rate",
    "compute_success_rate",
    "join_url",
    "validate_base_url",
]


def validate_base_url(url: str) -> str:
    """Return ``url`` without trailing slashes, or raise ValidationConfigError."""
    candidate = (url or "").strip()
    try:
        parsed = httpx.URL(candidate)
    except (httpx.InvalidURL, TypeError) as e:
        raise ValidationConfigError(f"invalid base URL {url!r}: {e}") from e
    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise ValidationConfigError(f"invalid base URL {url!r}: expected http(s)://host[:port]")
    if parsed.query or parsed.fragment:
        raise ValidationConfigError(f"invalid base URL {url!r}: query and fragment are not allowed")
    return candidate.rstrip("/")


def join_url(base_url: str, path: str) -> str:
    return f"{base_url.rstrip('/')}{path}"


class HealthAggregator:
    """Probes every endpoint once and folds the outcomes into one report.

    Probes run through a semaphore of ``max_concurrency`` slots (1 keeps
    them sequential); results keep the order of the endpoint list. A failed
    probe is data, so nothing here raises per endpoint. The aggregator does
    not log or print.
    """

    def __init__(self, probe: IProbe, *, max_concurrency: int = 1) -> None:
        if max_concurrency < 1:
            raise ValidationConfigError("max_concurrency must be >= 1")
        self.probe = probe
        self.max_concurrency = max_concurrency

    async def check_connectivity(self, base_url: str, *, timeout_ms: int) -> ConnectivityCheck:
        url = validate_base_url(base_url)
        return ConnectivityCheck(url=url, outcome=await self._probe_once(url, timeout_ms))

    async def run(
        self,
        base_url: str,
        endpoints: Sequence[EndpointSpec],
        *,
        timeout_ms: int,
        precheck: bool = False,
    ) -> AggregateReport:
        base = validate_base_url(base_url)
        if not endpoints:
            raise ValidationConfigError("no endpoints to validate")
        if timeout_ms <= 0:
            raise ValidationConfigError("timeout must be positive")

        report = AggregateReport(base_url=base)
        if precheck:
            report.connectivity = await self.check_connectivity(
                base, timeout_ms=timeout_ms
            )
            if not report.connectivity.reachable:
                return report

        sem = asyncio.Semaphore(self.max_concurrency)

        async def _one(spec: EndpointSpec) -> EndpointResult:
            url = join_url(base, spec.path)
            async with sem:
                outcome = await self._probe_once(url, timeout_ms)
            return EndpointResult(spec=spec, url=url, outcome=outcome)

        # gather keeps argument order, whatever order the probes finish in
        report.results = list(await asyncio.gather(*(_one(s) for s in endpoints)))
        return report

    async def _probe_once(self, url: str, timeout_ms: int) -> ProbeOutcome:
        start = time.perf_counter()
        try:
            return await self.probe.probe(url, timeout_ms)
        except Exception as e:
            dur_ms = int((time.perf_counter() - start) * 1000.0)
            return ProbeOutcome.failure(ErrorKind.OTHER, dur_ms, f"probe failed: {e}")
