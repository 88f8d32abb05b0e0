from __future__ import annotations

import json

import pytest

from application.services.health import TimeoutConfig
from application.use_cases import ValidateServiceUseCase
from domain.enums import ErrorKind
from presentation.cli import HealthCommand, build_parser
from fakes import FakeProbe, StubDNSChecker, StubPortChecker, fail, ok, status

BASE = "http://svc.test:5000"
HOSTING_PATHS = ["/", "/health", "/api/status", "/api/health", "/status"]
TIMEOUTS = TimeoutConfig(basic_timeout_ms=5000, comprehensive_timeout_ms=10000, dns_timeout_ms=100, port_timeout_ms=100)


def _command(outcomes, logger, *, dns_ok=True, port_ok=True):
    probe = FakeProbe(outcomes)
    dns = StubDNSChecker(dns_ok)
    use_case = ValidateServiceUseCase(
        probe,
        timeout=TIMEOUTS,
        logger=logger,
        dns_checker=dns,
        port_checker=StubPortChecker(port_ok),
    )
    return HealthCommand(use_case=use_case), probe, dns


def _all(code_or_outcome):
    return {f"{BASE}{p}": code_or_outcome for p in HOSTING_PATHS}


@pytest.mark.asyncio
async def test_validate_healthy_exits_zero(capsys, logger):
    outcomes = {BASE: ok(), **_all(ok())}
    cmd, probe, dns = _command(outcomes, logger)
    code = await cmd.execute(build_parser().parse_args(["validate", BASE]))
    out = capsys.readouterr().out
    assert code == 0
    assert "✅ Home (/): HTTP 200" in out
    assert "Success rate: 100%" in out
    assert "HEALTHY" in out
    assert dns.hosts == []


@pytest.mark.asyncio
async def test_validate_degraded_runs_diagnostics(capsys, logger):
    outcomes = {BASE: ok(), **_all(ok())}
    outcomes[f"{BASE}/api/health"] = status(404)
    outcomes[f"{BASE}/status"] = fail(ErrorKind.CONNECTION_RESET)
    cmd, _, dns = _command(outcomes, logger)
    code = await cmd.execute(build_parser().parse_args(["validate", BASE]))
    out = capsys.readouterr().out
    assert code == 1
    assert "⚠️  API Health (/api/health): HTTP 404 (Redirection/Client Error)" in out
    assert "❌ Status (/status): connection-reset" in out
    assert "Success rate: 60%" in out
    assert "DEGRADED" in out
    assert "Port 5000 on svc.test is open" in out
    assert dns.hosts == ["svc.test"]


@pytest.mark.asyncio
async def test_validate_unreachable_is_failed(capsys, logger):
    cmd, probe, _ = _command({BASE: fail(ErrorKind.CONNECTION_REFUSED)}, logger, port_ok=False)
    code = await cmd.execute(build_parser().parse_args(["validate", BASE, "--no-diagnostics"]))
    out = capsys.readouterr().out
    assert code == 1
    assert "FAILED" in out
    assert "Testing endpoints" not in out
    assert probe.calls == [BASE]


@pytest.mark.asyncio
async def test_validate_json_output(capsys, logger):
    outcomes = {BASE: ok(), **_all(ok())}
    outcomes[f"{BASE}/"] = fail(ErrorKind.TIMED_OUT)
    cmd, _, _ = _command(outcomes, logger)
    code = await cmd.execute(build_parser().parse_args(["validate", BASE, "--json", "--no-diagnostics"]))
    data = json.loads(capsys.readouterr().out)
    assert code == 1
    assert data["overall_status"] == "DEGRADED"
    assert data["detailed_validation"]["summary"]["success_rate"] == 80
    assert data["detailed_validation"]["endpoints"][0]["error_kind"] == "timed-out"
    assert "diagnostics" not in data


@pytest.mark.asyncio
async def test_validate_custom_endpoints_without_precheck(capsys, logger):
    outcomes = {f"{BASE}/ping": ok(), f"{BASE}/ready": ok()}
    cmd, probe, _ = _command(outcomes, logger)
    argv = ["validate", BASE, "2", "--no-precheck", "--endpoint", "/ping|Ping", "--endpoint", "/ready"]
    code = await cmd.execute(build_parser().parse_args(argv))
    out = capsys.readouterr().out
    assert code == 0
    assert probe.calls == [f"{BASE}/ping", f"{BASE}/ready"]
    assert "Timeout: 2s" in out
    assert "Ping (/ping)" in out


@pytest.mark.asyncio
async def test_comprehensive_preset_defaults_to_ten_seconds(capsys, logger):
    paths = HOSTING_PATHS + ["/api"]
    outcomes = {BASE: ok(), **{f"{BASE}{p}": ok() for p in paths}}
    cmd, probe, _ = _command(outcomes, logger)
    code = await cmd.execute(build_parser().parse_args(["validate", BASE, "--preset", "comprehensive"]))
    out = capsys.readouterr().out
    assert code == 0
    assert "Timeout: 10s" in out
    assert "Total endpoints tested: 6" in out


@pytest.mark.asyncio
async def test_malformed_url_is_config_error(capsys, logger):
    cmd, probe, _ = _command({}, logger)
    code = await cmd.execute(build_parser().parse_args(["validate", "localhost:5000", "--json"]))
    assert code == 2
    assert capsys.readouterr().out.startswith("Error:")
    assert probe.calls == []


@pytest.mark.asyncio
async def test_non_positive_timeout_is_config_error(capsys, logger):
    cmd, probe, _ = _command({}, logger)
    code = await cmd.execute(build_parser().parse_args(["validate", BASE, "0", "--json"]))
    assert code == 2
    assert probe.calls == []


@pytest.mark.asyncio
async def test_zero_concurrency_is_config_error(capsys, logger):
    cmd, probe, _ = _command({BASE: ok(), **_all(ok())}, logger)
    args = build_parser().parse_args(["validate", BASE, "--concurrency", "0", "--no-diagnostics"])
    code = await cmd.execute(args)
    assert code == 2
    assert "Error: max_concurrency must be >= 1" in capsys.readouterr().out
    assert probe.calls == []


@pytest.mark.asyncio
async def test_check_reachable_and_unreachable(capsys, logger):
    cmd, _, _ = _command({BASE: status(404)}, logger)
    assert await cmd.execute(build_parser().parse_args(["check", BASE])) == 0
    assert "Service is running and accessible" in capsys.readouterr().out

    cmd, _, _ = _command({BASE: fail(ErrorKind.HOST_NOT_FOUND)}, logger)
    assert await cmd.execute(build_parser().parse_args(["check", BASE])) == 1
    assert "Host not found" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_diagnose_accepts_bare_host(capsys, logger):
    cmd, _, dns = _command({}, logger, port_ok=False)
    code = await cmd.execute(build_parser().parse_args(["diagnose", "myhost.example"]))
    out = capsys.readouterr().out
    assert code == 1
    assert dns.hosts == ["myhost.example"]
    assert "Port 80 on myhost.example is closed or filtered" in out


def test_parser_defaults():
    args = build_parser().parse_args(["validate"])
    assert args.url.startswith("http")
    assert args.timeout is None
    assert args.preset == "hosting"
