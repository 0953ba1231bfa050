"""
Request and response envelopes exchanged with the API.

Summary:
    `RequestEnvelope` wraps an endpoint-specific body (`CompletionBody` or
    `ChatBody`) with the fields shared by every request. The wire codec
    flattens the body into the envelope's top-level JSON object.

    `ResponseEnvelope` is generic over the choice shape. Each choice model
    exposes ``content`` so that buffered and streaming paths share a single
    extraction rule: the envelope's ``text`` is the first choice's content.

Unknown keys in inbound payloads are ignored so newer server fields do not
break decoding.
"""
from __future__ import annotations

from typing import Generic, List, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict

from .message import Message


class CompletionBody(BaseModel):
    """Body of a ``completions`` request."""

    prompt: str


class ChatBody(BaseModel):
    """Body of a ``chat/completions`` request."""

    messages: List[Message]


RequestBody = Union[CompletionBody, ChatBody]


class RequestEnvelope(BaseModel):
    """Outgoing request; built fresh for every call and never persisted.

    Attributes:
        model: Resolved wire id (never the symbolic name).
        max_tokens: Optional completion token cap.
        temperature: Optional sampling temperature.
        stream: Whether the server should answer with an event stream.
        body: Endpoint-specific payload merged at the top level on encode.
    """

    model_config = ConfigDict(protected_namespaces=())

    model: str
    max_tokens: Optional[int] = None
    temperature: Optional[float] = None
    stream: bool = False
    body: RequestBody


class Usage(BaseModel):
    """Token accounting reported by the server (informational only)."""

    prompt_tokens: int
    completion_tokens: int
    total_tokens: int


class CompletionChoice(BaseModel):
    """Choice returned by the ``completions`` endpoint (buffered or streamed)."""

    text: str
    index: int
    finish_reason: Optional[str] = None

    @property
    def content(self) -> Optional[str]:
        return self.text


class ChatChoice(BaseModel):
    """Full-message choice returned by a buffered chat call."""

    message: Message
    index: int
    finish_reason: Optional[str] = None

    @property
    def content(self) -> Optional[str]:
        return self.message.content


class ChatDeltaChoice(BaseModel):
    """Partial-content choice carried by one streamed chat fragment."""

    delta: Message
    index: int
    finish_reason: Optional[str] = None

    @property
    def content(self) -> Optional[str]:
        return self.delta.content


ChoiceT = TypeVar("ChoiceT", CompletionChoice, ChatChoice, ChatDeltaChoice)


class ResponseEnvelope(BaseModel, Generic[ChoiceT]):
    """Decoded response (or stream fragment) from either endpoint."""

    choices: List[ChoiceT]
    usage: Optional[Usage] = None

    @property
    def text(self) -> Optional[str]:
        """Content of the first choice, or ``None`` when there are no choices."""
        return self.choices[0].content if self.choices else None


CompletionResponse = ResponseEnvelope[CompletionChoice]
ChatResponse = ResponseEnvelope[ChatChoice]
ChatDeltaResponse = ResponseEnvelope[ChatDeltaChoice]


__all__ = [
    "CompletionBody",
    "ChatBody",
    "RequestBody",
    "RequestEnvelope",
    "Usage",
    "CompletionChoice",
    "ChatChoice",
    "ChatDeltaChoice",
    "ResponseEnvelope",
    "CompletionResponse",
    "ChatResponse",
    "ChatDeltaResponse",
]
