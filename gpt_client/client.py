"""Public client facade.

`GPTClient` composes the request builder, transport, stream decoder and chat
engine behind the operations callers use::

    async with GPTClient(api_key) as client:
        client.temperature = 0.2
        result = await client.complete("Say hi")
        print(result.text)

        reply = await client.chat("My name is Ada")
        async with client.chat_stream("What is my name?") as stream:
            async for piece in stream:
                print(piece, end="")

Concurrency: one logical caller per instance. Configuration and history are
plain owned state without locking; concurrent ``chat``/``chat_stream``/
``clear_history`` calls on one instance must be serialized by the caller.
"""
from __future__ import annotations

import logging
from typing import Any, List, Optional

import httpx

from .base import codec
from .base.constants import MISSING_API_KEY_ERROR
from .base.conversation import ChatEngine, ConversationHistory
from .base.http import create_async_client
from .base.logging import LogContext, get_logger, log_event
from .base.models import (
    CompletionBody,
    CompletionResponse,
    Configuration,
    EndPoint,
    ModelRef,
    RequestBody,
)
from .base.request_builder import build_request
from .base.streaming import StreamResponse, decode_stream
from .base.transport import Transport
from .config import get_client_config
from .config.defaults import DEFAULT_BASE_URL


class GPTClient:
    """Client for the completions and chat endpoints.

    Parameters:
        api_key: Bearer token; required and non-empty.
        configuration: Initial request configuration (defaults to
            :meth:`Configuration.standard`).
        base_url: API root; defaults to the public API.
        http_client: Optional ``httpx.AsyncClient`` to send requests with. An
            injected client is never closed by this object.
        remember_replies: Store assistant replies in the chat history as well
            as user turns.

    Raises:
        ValueError: If ``api_key`` is empty.
    """

    def __init__(
        self,
        api_key: str,
        *,
        configuration: Optional[Configuration] = None,
        base_url: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        remember_replies: bool = False,
    ) -> None:
        if not api_key:
            raise ValueError(MISSING_API_KEY_ERROR)
        self._api_key = api_key
        self._base_url = base_url or DEFAULT_BASE_URL
        self.configuration = configuration or Configuration.standard()
        self._owns_http_client = http_client is None
        self._http_client = http_client or create_async_client(self._base_url)
        self._transport = Transport(self._http_client)
        self._engine = ChatEngine(
            ConversationHistory(),
            self._build,
            self._transport,
            remember_replies=remember_replies,
        )
        self._logger = get_logger("gpt_client.client")

    @classmethod
    def from_env(cls, **overrides: Any) -> "GPTClient":
        """Build a client from the merged configuration sources.

        ``overrides`` may contain any of ``api_key``, ``base_url``, ``model``,
        ``temperature``, ``max_tokens`` and, additionally, ``http_client`` and
        ``remember_replies``.
        """
        http_client = overrides.pop("http_client", None)
        remember_replies = overrides.pop("remember_replies", False)
        cfg = get_client_config(overrides)
        configuration = Configuration(
            model=cfg.get("model"),
            temperature=cfg.get("temperature"),
            max_tokens=cfg.get("max_tokens"),
        )
        return cls(
            cfg.get("api_key") or "",
            configuration=configuration,
            base_url=cfg.get("base_url"),
            http_client=http_client,
            remember_replies=remember_replies,
        )

    # ---- Configuration proxies ----
    @property
    def model(self) -> Optional[ModelRef]:
        return self.configuration.model

    @model.setter
    def model(self, value: Optional[ModelRef]) -> None:
        self.configuration.model = value

    @property
    def temperature(self) -> Optional[float]:
        return self.configuration.temperature

    @temperature.setter
    def temperature(self, value: Optional[float]) -> None:
        self.configuration.temperature = value

    @property
    def max_tokens(self) -> Optional[int]:
        return self.configuration.max_tokens

    @max_tokens.setter
    def max_tokens(self, value: Optional[int]) -> None:
        self.configuration.max_tokens = value

    @property
    def base_url(self) -> str:
        return self._base_url

    # ---- Completions ----
    async def complete(self, prompt: str) -> CompletionResponse:
        """Run a buffered completion and return the decoded envelope."""
        request = self._build(EndPoint.COMPLETIONS, CompletionBody(prompt=prompt), False)
        data = await self._transport.call_buffered(request)
        return codec.decode(data, CompletionResponse)

    def complete_stream(self, prompt: str) -> StreamResponse[str]:
        """Stream a completion as text fragments."""
        request = self._build(EndPoint.COMPLETIONS, CompletionBody(prompt=prompt), True)
        ctx = LogContext(endpoint=EndPoint.COMPLETIONS.path)
        return StreamResponse(
            lambda: self._transport.call_stream(request),
            lambda lines: decode_stream(lines, CompletionResponse, ctx),
        )

    # ---- Chat ----
    async def chat(self, text: str) -> str:
        """Send ``text`` within the running conversation; return the reply."""
        return await self._engine.chat(text)

    def chat_stream(self, text: str) -> StreamResponse[str]:
        """Stream the reply to ``text`` within the running conversation."""
        return self._engine.chat_stream(text)

    def clear_history(self) -> None:
        self._engine.clear_history()
        log_event(self._logger, "history.clear", level=logging.DEBUG)

    def historical(self) -> List[str]:
        """Contents of the stored conversation turns, oldest first."""
        return self._engine.historical()

    # ---- Lifecycle ----
    async def aclose(self) -> None:
        """Close the HTTP client if this object created it."""
        if self._owns_http_client:
            await self._http_client.aclose()

    async def __aenter__(self) -> "GPTClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    def _build(self, endpoint: EndPoint, body: RequestBody, stream: bool) -> httpx.Request:
        return build_request(
            endpoint,
            body,
            stream=stream,
            configuration=self.configuration,
            api_key=self._api_key,
            base_url=self._base_url,
        )


__all__ = ["GPTClient"]
