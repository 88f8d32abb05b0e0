"""Use case: validate a service's well-known endpoints."""
from __future__ import annotations

from typing import Optional, Sequence

import httpx

from config import settings
from core.logging.context import context, new_run_id
from core.logging.logger import StructuredLogger, get_logger
from domain.entities import AggregateReport, ConnectivityCheck, DiagnosticsReport, EndpointSpec
from domain.errors import ValidationConfigError
from domain.interfaces import IProbe
from application.services.health import (
    DNSChecker,
    HealthAggregator,
    HTTPChecker,
    PortChecker,
    TimeoutConfig,
    preset_endpoints,
    validate_base_url,
)

DEFAULT_PRESET = "hosting"


class ValidateServiceUseCase:
    """
    Wires the HTTP probe, the aggregator and the diagnostics checkers.

    One instance can serve several runs; every run builds a fresh report.
    ─────────────────────────────────────────────────────────────────
    execute()   pre-check + endpoint list → AggregateReport
    check()     base URL only             → ConnectivityCheck
    diagnose()  DNS + TCP port            → DiagnosticsReport
    ─────────────────────────────────────────────────────────────────
    """

    def __init__(
        self,
        probe: Optional[IProbe] = None,
        *,
        timeout: Optional[TimeoutConfig] = None,
        logger: Optional[StructuredLogger] = None,
        dns_checker: Optional[DNSChecker] = None,
        port_checker: Optional[PortChecker] = None,
    ) -> None:
        self.logger = logger or get_logger(__name__, service="validator")
        self.timeout = timeout or TimeoutConfig.from_env()
        self.probe = probe or HTTPChecker(logger=self.logger)
        self.dns_checker = dns_checker or DNSChecker(self.timeout, self.logger)
        self.port_checker = port_checker or PortChecker(self.timeout, self.logger)

    async def execute(
        self,
        base_url: str,
        *,
        preset: str = DEFAULT_PRESET,
        endpoints: Optional[Sequence[EndpointSpec]] = None,
        timeout_s: Optional[float] = None,
        precheck: bool = True,
        max_concurrency: Optional[int] = None,
    ) -> AggregateReport:
        specs = list(endpoints) if endpoints else preset_endpoints(preset)
        timeout_ms = self.resolve_timeout_ms(timeout_s, preset)
        aggregator = HealthAggregator(
            self.probe,
            max_concurrency=max_concurrency if max_concurrency is not None else settings.MAX_CONCURRENT_PROBES,
        )
        with context(run_id=new_run_id(), target=base_url):
            self.logger.info(
                lambda: f"validation-start endpoints={len(specs)} timeout_ms={timeout_ms} precheck={precheck}",
                extra={"url": base_url},
            )
            report = await aggregator.run(
                base_url, specs, timeout_ms=timeout_ms, precheck=precheck
            )
            log = self.logger.success if report.exit_code == 0 else self.logger.warning
            log(
                lambda: (
                    f"validation-complete status={report.overall_status.value} "
                    f"ok={report.successful}/{report.total} rate={report.success_rate}%"
                ),
                extra={"url": report.base_url},
            )
        return report

    async def check(self, base_url: str, *, timeout_s: Optional[float] = None) -> ConnectivityCheck:
        timeout_ms = self.resolve_timeout_ms(timeout_s, "basic")
        with context(run_id=new_run_id(), target=base_url):
            result = await HealthAggregator(self.probe).check_connectivity(base_url, timeout_ms=timeout_ms)
            self.logger.info(
                lambda: f"connectivity reachable={result.reachable}",
                extra={"url": result.url, "status": result.outcome.status_code},
            )
        return result

    async def diagnose(self, base_url: str) -> DiagnosticsReport:
        host, port = target_host_port(base_url)
        dns = await self.dns_checker.check(host)
        port_check = await self.port_checker.check(host, port)
        return DiagnosticsReport(host=host, port=port, dns=dns, port_check=port_check)

    def resolve_timeout_ms(self, timeout_s: Optional[float], preset: str) -> int:
        """Explicit timeout in ms, or the preset default when none was given."""
        if timeout_s is None:
            if preset.lower() == "comprehensive":
                return self.timeout.comprehensive_timeout_ms
            return self.timeout.basic_timeout_ms
        if timeout_s <= 0:
            raise ValidationConfigError("timeout must be positive")
        return int(timeout_s * 1000)


def target_host_port(url: str) -> tuple[str, int]:
    """Host and port of a base URL; port defaults to 80/443 by scheme.

    A bare host name (``myhost.com``) is accepted and treated as http.
    """
    if "://" not in url:
        url = f"http://{url}"
    parsed = httpx.URL(validate_base_url(url))
    port = parsed.port or (443 if parsed.scheme == "https" else 80)
    return parsed.host, port
