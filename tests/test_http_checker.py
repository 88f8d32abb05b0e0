from __future__ import annotations

import asyncio
import socket

import httpx
import pytest

from application.services.health import HTTPChecker, classify_transport_error
from domain.enums import ErrorKind
from presentation.demo_server import create_app


def _checker(logger, handler) -> HTTPChecker:
    return HTTPChecker(logger=logger, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_probe_records_status_and_time(logger):
    checker = _checker(logger, lambda request: httpx.Response(200, json={"status": "ok"}))
    outcome = await checker.probe("http://svc.test/health", 5000)
    assert outcome.status_code == 200
    assert outcome.error_kind is None
    assert outcome.response_time_ms >= 0


@pytest.mark.asyncio
async def test_probe_returns_error_statuses_as_data(logger):
    checker = _checker(logger, lambda request: httpx.Response(503))
    outcome = await checker.probe("http://svc.test/", 5000)
    assert outcome.status_code == 503


@pytest.mark.asyncio
async def test_probe_does_not_follow_redirects(logger):
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url.path)
        return httpx.Response(302, headers={"Location": "/elsewhere"})

    outcome = await _checker(logger, handler).probe("http://svc.test/", 5000)
    assert outcome.status_code == 302
    assert seen == ["/"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "exc,kind",
    [
        (httpx.ConnectError("[Errno 111] Connection refused"), ErrorKind.CONNECTION_REFUSED),
        (httpx.ReadError("[Errno 104] Connection reset by peer"), ErrorKind.CONNECTION_RESET),
        (httpx.RemoteProtocolError("Server disconnected without sending a response."), ErrorKind.CONNECTION_RESET),
        (httpx.ConnectError("[Errno -2] Name or service not known"), ErrorKind.HOST_NOT_FOUND),
        (httpx.ConnectTimeout("timed out"), ErrorKind.TIMED_OUT),
        (httpx.ReadTimeout("read timeout"), ErrorKind.TIMED_OUT),
        (httpx.UnsupportedProtocol("Request URL has an unsupported protocol"), ErrorKind.OTHER),
    ],
)
async def test_transport_errors_are_classified(logger, exc, kind):
    def handler(request: httpx.Request) -> httpx.Response:
        raise exc

    outcome = await _checker(logger, handler).probe("http://svc.test/", 5000)
    assert outcome.status_code is None
    assert outcome.error_kind is kind
    assert outcome.error
    assert outcome.response_time_ms >= 0


@pytest.mark.asyncio
async def test_hung_request_is_bounded_by_timeout(logger):
    async def handler(request: httpx.Request) -> httpx.Response:
        await asyncio.sleep(5)
        return httpx.Response(200)

    outcome = await _checker(logger, handler).probe("http://svc.test/slow", 100)
    assert outcome.error_kind is ErrorKind.TIMED_OUT
    assert outcome.response_time_ms < 2000


def test_classify_uses_cause_chain():
    def wrapped(cause: BaseException) -> httpx.ConnectError:
        try:
            raise cause
        except BaseException as inner:
            try:
                raise httpx.ConnectError("All connection attempts failed") from inner
            except httpx.ConnectError as outer:
                return outer

    assert classify_transport_error(wrapped(ConnectionRefusedError(111, "x"))) is ErrorKind.CONNECTION_REFUSED
    assert classify_transport_error(wrapped(ConnectionResetError(104, "x"))) is ErrorKind.CONNECTION_RESET
    assert classify_transport_error(wrapped(socket.gaierror(-2, "x"))) is ErrorKind.HOST_NOT_FOUND
    assert classify_transport_error(wrapped(OSError(99, "x"))) is ErrorKind.OTHER


@pytest.mark.asyncio
async def test_probe_against_demo_app(logger):
    checker = HTTPChecker(logger=logger, transport=httpx.ASGITransport(app=create_app()))
    health = await checker.probe("http://testserver/health", 5000)
    missing = await checker.probe("http://testserver/api/health", 5000)
    assert health.status_code == 200
    assert missing.status_code == 404
