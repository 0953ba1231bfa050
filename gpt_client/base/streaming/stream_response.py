"""Explicitly scoped, lazily opened stream of decoded items.

`StreamResponse` binds a connection opener (``Transport.call_stream``) to a
transform over its lines. The connection is opened on ``__aenter__`` or on
the first pull, and closed on ``aclose()``, on leaving ``async with``, when
the items are exhausted, or when iteration raises. A consumer that breaks out
of a loop early should use ``async with`` (or call ``aclose()``) so that the
socket is released immediately rather than at garbage collection::

    async with client.chat_stream("hello") as stream:
        async for piece in stream:
            print(piece, end="")

A stream is single-use: it cannot be restarted once closed.
"""
from __future__ import annotations

from contextlib import AsyncExitStack
from typing import AsyncContextManager, AsyncIterator, Callable, Generic, Optional, TypeVar

T = TypeVar("T")

LineSource = Callable[[], AsyncContextManager[AsyncIterator[str]]]
Transform = Callable[[AsyncIterator[str]], AsyncIterator[T]]


class StreamResponse(Generic[T]):
    """Async iterable over decoded stream items owning its connection.

    Parameters:
        open_lines: Zero-argument callable returning the async context manager
            that yields the raw line iterator (and closes the connection on exit).
        transform: Maps the raw line iterator to the item iterator.
    """

    def __init__(self, open_lines: LineSource, transform: "Transform[T]") -> None:
        self._open_lines = open_lines
        self._transform = transform
        self._stack = AsyncExitStack()
        self._items: Optional[AsyncIterator[T]] = None
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    async def open(self) -> "StreamResponse[T]":
        """Open the connection if not already open.

        Raises:
            RuntimeError: If the stream was already closed.
            GPTError: Any error raised while opening (e.g. ``ResponseError``).
        """
        if self._closed:
            raise RuntimeError("stream is closed")
        if self._items is None:
            try:
                lines = await self._stack.enter_async_context(self._open_lines())
            except BaseException:
                await self.aclose()
                raise
            self._items = self._transform(lines)
        return self

    async def aclose(self) -> None:
        """Close the item pipeline and the underlying connection. Idempotent."""
        if self._closed:
            return
        self._closed = True
        items, self._items = self._items, None
        try:
            aclose = getattr(items, "aclose", None)
            if aclose is not None:
                await aclose()
        finally:
            await self._stack.aclose()

    async def __aenter__(self) -> "StreamResponse[T]":
        return await self.open()

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    def __aiter__(self) -> "StreamResponse[T]":
        return self

    async def __anext__(self) -> T:
        if self._closed:
            raise StopAsyncIteration
        await self.open()
        if self._items is None:
            raise RuntimeError("stream has no open item pipeline")
        try:
            return await self._items.__anext__()
        except BaseException:
            # Exhaustion, decode errors and cancellation all release the socket.
            await self.aclose()
            raise

    async def collect(self) -> list[T]:
        """Drain the stream into a list and close it."""
        async with self:
            return [item async for item in self]


__all__ = ["StreamResponse"]
