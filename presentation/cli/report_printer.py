"""Human-readable rendering of validation results."""
from __future__ import annotations

import json
from datetime import datetime
from typing import List, Optional

from domain.entities import AggregateReport, ConnectivityCheck, DiagnosticsReport, EndpointResult

RULE_WIDTH = 50


def rule(char: str = "=") -> str:
    return char * RULE_WIDTH


def format_header(title: str, url: str, *, preset: str, endpoint_count: int, timeout_s: float) -> List[str]:
    return [
        title,
        rule(),
        f"URL: {url}",
        f"Preset: {preset} ({endpoint_count} endpoints)",
        f"Timeout: {timeout_s:g}s",
        f"Time: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}",
        rule(),
    ]


def format_connectivity(check: ConnectivityCheck) -> str:
    o = check.outcome
    if check.reachable:
        return f"✅ Service is accessible on {check.url} ({o.label} - {o.response_time_ms}ms)"
    if o.error_kind is not None:
        return f"❌ {o.error_kind.description} on {check.url} ({o.error_kind.value} - {o.response_time_ms}ms)"
    return f"❌ Service is not accessible on {check.url} ({o.label} - {o.response_time_ms}ms)"


def format_endpoint_line(result: EndpointResult) -> str:
    """One line per endpoint: symbol, name, path, HTTP code or error, elapsed time."""
    o = result.outcome
    where = f"{result.spec.name} ({result.spec.path})"
    if result.success:
        return f"✅ {where}: {o.label} - {o.response_time_ms}ms"
    code = o.status_code
    if code is not None and 300 <= code < 500:
        return f"⚠️  {where}: {o.label} (Redirection/Client Error) - {o.response_time_ms}ms"
    if code is not None and code >= 500:
        return f"❌ {where}: {o.label} (Server Error) - {o.response_time_ms}ms"
    return f"❌ {where}: {o.label} - {o.response_time_ms}ms"


def format_summary(report: AggregateReport) -> List[str]:
    status = report.overall_status
    if report.precheck_failed:
        return [
            rule(),
            "Validation Summary:",
            "  Service is not accessible. Endpoint checks skipped.",
            f"  Status: {status.symbol} {status.value}",
            rule(),
        ]
    return [
        rule(),
        "Validation Summary:",
        f"  Total endpoints tested: {report.total}",
        f"  Successful: {report.successful}",
        f"  Failed: {report.failed}",
        f"  Success rate: {report.success_rate}%",
        f"  Status: {status.symbol} {status.value}",
        rule(),
    ]


def format_report(report: AggregateReport) -> List[str]:
    lines: List[str] = []
    if report.connectivity is not None:
        lines.append(format_connectivity(report.connectivity))
        lines.append("")
    if not report.precheck_failed:
        lines.append("Testing endpoints:")
        lines.append("")
        lines.extend(format_endpoint_line(r) for r in report.results)
        lines.append("")
    lines.extend(format_summary(report))
    return lines


def format_diagnostics(diag: DiagnosticsReport) -> List[str]:
    lines = ["🔧 Additional Diagnostics:"]
    if diag.dns.success:
        addrs = ", ".join(diag.dns.addresses[:3])
        lines.append(f"  ✅ Host {diag.host} resolves ({addrs})" if addrs else f"  ✅ Host {diag.host} resolves")
    else:
        lines.append(f"  ❌ Host {diag.host} could not be resolved ({diag.dns.error})")
    if diag.port_check.success:
        lines.append(f"  ✅ Port {diag.port} on {diag.host} is open")
    else:
        lines.append(f"  ❌ Port {diag.port} on {diag.host} is closed or filtered ({diag.port_check.error})")
    return lines


def to_json(report: AggregateReport, diagnostics: Optional[DiagnosticsReport] = None) -> str:
    payload = report.to_dict()
    if diagnostics is not None:
        payload["diagnostics"] = diagnostics.to_dict()
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
