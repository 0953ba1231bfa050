from __future__ import annotations

import httpx
import pytest

from gpt_client.base.errors import ErrorCode, ResponseError, TransportError
from gpt_client.base.transport import Transport

from .helpers import BASE_URL, Recorder, sse

pytestmark = pytest.mark.anyio


def _request() -> httpx.Request:
    return httpx.Request("POST", f"{BASE_URL}/completions", content=b"{}")


def _transport(*responses: httpx.Response) -> Transport:
    client = httpx.AsyncClient(transport=httpx.MockTransport(Recorder(list(responses))))
    return Transport(client)


class _OddClient:
    """Stands in for an HTTP client that returns a non-HTTP object."""

    async def send(self, request, stream=False):
        return object()


class _FailingClient:
    def __init__(self, exc: Exception) -> None:
        self.exc = exc

    async def send(self, request, stream=False):
        raise self.exc


async def test_buffered_returns_body_on_200():
    transport = _transport(httpx.Response(200, content=b'{"ok": true}'))
    assert await transport.call_buffered(_request()) == b'{"ok": true}'


async def test_buffered_non_200_raises_response_error_with_body():
    transport = _transport(httpx.Response(429, content=b"rate limited"))
    with pytest.raises(ResponseError) as info:
        await transport.call_buffered(_request())
    err = info.value
    assert err.status_code == 429
    assert err.body_text == "rate limited"
    assert err.code is ErrorCode.RATE_LIMIT
    assert err.retryable


async def test_stream_yields_lines_on_200():
    transport = _transport(httpx.Response(200, content=sse("data: one", "", "data: two")))
    async with transport.call_stream(_request()) as lines:
        got = [line async for line in lines]
    assert got == ["data: one", "", "data: two"]


async def test_stream_error_body_is_drained_and_joined():
    transport = _transport(httpx.Response(500, content=b"server\nexploded\n"))
    with pytest.raises(ResponseError) as info:
        async with transport.call_stream(_request()):
            pytest.fail("block must not run on a non-200 status")
    assert info.value.status_code == 500
    assert info.value.body_text == "serverexploded"
    assert info.value.code is ErrorCode.SERVER_ERROR


async def test_non_http_result_is_invalid_response_shape():
    transport = Transport(_OddClient())  # type: ignore[arg-type]
    with pytest.raises(TransportError) as info:
        await transport.call_buffered(_request())
    assert info.value.code is ErrorCode.INVALID_RESPONSE_SHAPE
    with pytest.raises(TransportError) as info:
        async with transport.call_stream(_request()):
            pass
    assert info.value.code is ErrorCode.INVALID_RESPONSE_SHAPE


async def test_httpx_failures_are_wrapped():
    request = _request()
    transport = Transport(_FailingClient(httpx.ConnectError("refused", request=request)))  # type: ignore[arg-type]
    with pytest.raises(TransportError) as info:
        await transport.call_buffered(request)
    assert info.value.code is ErrorCode.TRANSIENT
    assert isinstance(info.value.raw, httpx.ConnectError)

    transport = Transport(_FailingClient(httpx.ReadTimeout("slow", request=request)))  # type: ignore[arg-type]
    with pytest.raises(TransportError) as info:
        await transport.call_buffered(request)
    assert info.value.code is ErrorCode.TIMEOUT
