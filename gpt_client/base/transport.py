"""Transport invoker: send a built request and apply the status policy.

Summary:
- ``call_buffered`` awaits the whole body and returns it on HTTP 200.
- ``call_stream`` is an async context manager handing the caller the live
  line iterator on HTTP 200. The response is closed on every exit path of
  the ``async with`` block, including an early ``break`` by the consumer.

Both entry points share one policy: anything but 200 becomes a
:class:`ResponseError` carrying the status and the verbatim body text. For a
streamed error the body arrives as lines, so it is drained and joined before
raising. A return value that is not an ``httpx.Response`` raises
:class:`TransportError` (``INVALID_RESPONSE_SHAPE``); ``httpx`` transport
failures are wrapped into :class:`TransportError` with a classified code.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import httpx

from .constants import HTTP_OK
from .errors import ResponseError, TransportError, classify_exception
from .logging import LogContext, get_logger, log_event


class Transport:
    """Issue requests through an ``httpx.AsyncClient``.

    Parameters:
        http_client: The client used to send requests. The transport never
            closes it; ownership stays with the caller.
        logger: Optional logger override.
    """

    def __init__(self, http_client: httpx.AsyncClient, logger: Optional[logging.Logger] = None) -> None:
        self._client = http_client
        self._logger = logger or get_logger("gpt_client.network")

    async def call_buffered(self, request: httpx.Request) -> bytes:
        """Send ``request`` and return the body of a 200 response.

        Raises:
            ResponseError: Non-200 status.
            TransportError: Invalid response shape or network failure.
        """
        ctx = _context(request)
        response = await self._send(request, ctx, stream=False)
        if response.status_code == HTTP_OK:
            log_event(self._logger, "response.ok", ctx, level=logging.DEBUG, status=response.status_code, body=response.text)
            return response.content
        raise self._response_error(ctx, response.status_code, response.text)

    @asynccontextmanager
    async def call_stream(self, request: httpx.Request) -> AsyncIterator[AsyncIterator[str]]:
        """Open a streaming call and yield its line iterator.

        Usage::

            async with transport.call_stream(request) as lines:
                async for line in lines:
                    ...

        Raises:
            ResponseError: Non-200 status (raised on entering the block, after
                the error body has been drained).
            TransportError: Invalid response shape or network failure.
        """
        ctx = _context(request)
        response = await self._send(request, ctx, stream=True)
        lines = None
        try:
            if response.status_code != HTTP_OK:
                error_text = ""
                async for line in response.aiter_lines():
                    error_text += line
                raise self._response_error(ctx, response.status_code, error_text)
            log_event(self._logger, "stream.open", ctx, status=response.status_code)
            lines = self._logged_lines(response, ctx)
            yield lines
        finally:
            if lines is not None:
                await lines.aclose()
            await response.aclose()
            log_event(self._logger, "stream.close", ctx, level=logging.DEBUG)

    async def _send(self, request: httpx.Request, ctx: LogContext, *, stream: bool) -> httpx.Response:
        try:
            response = await self._client.send(request, stream=stream)
        except httpx.HTTPError as e:
            code = classify_exception(e)
            log_event(self._logger, "request.failed", ctx, level=logging.ERROR, error=str(e), error_code=code.value)
            raise TransportError(message=str(e) or type(e).__name__, code=code, raw=e) from e
        if not isinstance(response, httpx.Response):
            error = TransportError.invalid_response_shape(response)
            log_event(self._logger, "request.failed", ctx, level=logging.ERROR, error=error.message, error_code=error.code.value)
            raise error
        return response

    async def _logged_lines(self, response: httpx.Response, ctx: LogContext) -> AsyncIterator[str]:
        async for line in response.aiter_lines():
            log_event(self._logger, "stream.line", ctx, level=logging.DEBUG, line=line)
            yield line

    def _response_error(self, ctx: LogContext, status_code: int, body_text: str) -> ResponseError:
        error = ResponseError(status_code, body_text)
        log_event(
            self._logger,
            "response.error",
            ctx,
            level=logging.ERROR,
            status=status_code,
            error=body_text,
            error_code=error.code.value,
        )
        return error


def _context(request: httpx.Request) -> LogContext:
    return LogContext(endpoint=request.url.path)


__all__ = ["Transport"]
