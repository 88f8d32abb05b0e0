from __future__ import annotations

import asyncio
import socket

import pytest

from application.services.health import DNSChecker, PortChecker, TimeoutConfig
from application.use_cases import target_host_port

TIMEOUTS = TimeoutConfig(basic_timeout_ms=1000, comprehensive_timeout_ms=1000, dns_timeout_ms=2000, port_timeout_ms=1000)


def _free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]


@pytest.mark.asyncio
async def test_port_open(logger):
    server = await asyncio.start_server(lambda r, w: w.close(), "127.0.0.1", 0)
    port = server.sockets[0].getsockname()[1]
    try:
        result = await PortChecker(TIMEOUTS, logger).check("127.0.0.1", port)
    finally:
        server.close()
        await server.wait_closed()
    assert result.success
    assert result.latency_ms is not None


@pytest.mark.asyncio
async def test_port_closed(logger):
    result = await PortChecker(TIMEOUTS, logger).check("127.0.0.1", _free_port())
    assert not result.success
    assert result.error


@pytest.mark.asyncio
async def test_dns_resolves_localhost(logger):
    result = await DNSChecker(TIMEOUTS, logger).check("localhost")
    assert result.success
    assert result.addresses


@pytest.mark.asyncio
async def test_dns_unknown_host(logger):
    result = await DNSChecker(TIMEOUTS, logger).check("does-not-exist.invalid")
    assert not result.success
    assert result.error


@pytest.mark.parametrize(
    "url,expected",
    [
        ("http://localhost:5000", ("localhost", 5000)),
        ("https://myhost.com", ("myhost.com", 443)),
        ("http://myhost.com/app", ("myhost.com", 80)),
        ("myhost.com", ("myhost.com", 80)),
    ],
)
def test_target_host_port(url, expected):
    assert target_host_port(url) == expected
