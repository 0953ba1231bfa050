"""Running chat conversation: history ownership and the chat call flows.

History rules:
- Buffered ``chat``: the user turn is appended only after a reply has been
  received and decoded with content. A failed call leaves history untouched.
- Streaming ``chat_stream``: the user turn is appended once, when the first
  content fragment is yielded. A stream that yields nothing appends nothing.
- Assistant replies are not stored unless ``remember_replies`` is enabled, in
  which case the reply is appended after the user turn (for streams, the
  joined fragments once the stream completes normally).

Not safe for concurrent use: callers must serialize ``chat``/``chat_stream``/
``clear_history`` on one engine.
"""
from __future__ import annotations

from typing import AsyncIterator, Callable, Iterator, List, Tuple

import httpx

from . import codec
from .errors import NoChoicesError, NoContentError
from .logging import LogContext, get_logger, log_event
from .models import ChatBody, ChatDeltaResponse, ChatResponse, EndPoint, Message, RequestBody
from .streaming import StreamResponse, decode_stream
from .transport import Transport

RequestFactory = Callable[[EndPoint, RequestBody, bool], httpx.Request]

ASSISTANT_ROLE = "assistant"


class ConversationHistory:
    """Ordered, append-only record of chat messages (cleared explicitly)."""

    def __init__(self) -> None:
        self._messages: List[Message] = []

    def append(self, message: Message) -> None:
        self._messages.append(message)

    def clear(self) -> None:
        self._messages.clear()

    @property
    def messages(self) -> Tuple[Message, ...]:
        """Snapshot of the stored messages."""
        return tuple(self._messages)

    def contents(self) -> List[str]:
        """Content of every stored message, skipping those without content."""
        return [m.content for m in self._messages if m.content is not None]

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(tuple(self._messages))


class ChatEngine:
    """Chat flows on top of a history, a request factory and a transport.

    Parameters:
        history: The history this engine owns.
        request_factory: ``(endpoint, body, stream) -> httpx.Request``.
        transport: Invoker used to send requests.
        remember_replies: Also store assistant replies in history.
    """

    def __init__(
        self,
        history: ConversationHistory,
        request_factory: RequestFactory,
        transport: Transport,
        *,
        remember_replies: bool = False,
    ) -> None:
        self.history = history
        self.remember_replies = remember_replies
        self._request_factory = request_factory
        self._transport = transport
        self._logger = get_logger("gpt_client.conversation")

    def _body_with(self, message: Message) -> ChatBody:
        return ChatBody(messages=[*self.history.messages, message])

    async def chat(self, text: str) -> str:
        """Send ``text`` with the accumulated history and return the reply.

        Raises:
            NoChoicesError: The response has an empty choice list.
            NoContentError: The first choice carries no content.
            ResponseError, TransportError, DecodeError: Propagated from the
                transport and codec.
        """
        message = Message(content=text)
        request = self._request_factory(EndPoint.CHAT, self._body_with(message), False)
        data = await self._transport.call_buffered(request)
        response = codec.decode(data, ChatResponse)
        if not response.choices:
            raise NoChoicesError()
        reply = response.text
        if reply is None:
            raise NoContentError()
        self.history.append(message)
        if self.remember_replies:
            self.history.append(Message(role=ASSISTANT_ROLE, content=reply))
        log_event(self._logger, "chat.turn", LogContext(endpoint=EndPoint.CHAT.path), history_size=len(self.history))
        return reply

    def chat_stream(self, text: str) -> StreamResponse[str]:
        """Stream the reply to ``text`` as content fragments.

        The request (including the history snapshot) is built immediately; the
        connection opens when the returned stream is entered or first pulled.
        """
        message = Message(content=text)
        request = self._request_factory(EndPoint.CHAT, self._body_with(message), True)
        ctx = LogContext(endpoint=EndPoint.CHAT.path)

        async def _contents(lines: AsyncIterator[str]) -> AsyncIterator[str]:
            appended = False
            pieces: List[str] = []
            async for piece in decode_stream(lines, ChatDeltaResponse, ctx):
                if not appended:
                    self.history.append(message)
                    appended = True
                pieces.append(piece)
                yield piece
            if appended and self.remember_replies:
                self.history.append(Message(role=ASSISTANT_ROLE, content="".join(pieces)))

        return StreamResponse(lambda: self._transport.call_stream(request), _contents)

    def clear_history(self) -> None:
        self.history.clear()

    def historical(self) -> List[str]:
        return self.history.contents()


__all__ = ["ConversationHistory", "ChatEngine", "RequestFactory"]
