"""gpt_client package

Async client for an OpenAI-compatible completions/chat HTTP API, with
server-sent-event streaming and a minimal running chat history.

Public API (re-exported):
    - Version: ``__version__``
    - Client: :class:`GPTClient`
    - Models: :class:`Model`, :func:`custom`, :class:`EndPoint`,
      :class:`Configuration`, :class:`Message`
    - Envelopes: :class:`CompletionResponse`, :class:`ChatResponse`,
      :class:`ChatDeltaResponse`, :class:`Usage`
    - Streams: :class:`StreamResponse`
    - Errors: :class:`GPTError`, :class:`ErrorCode`, :class:`TransportError`,
      :class:`ResponseError`, :class:`DecodeError`, :class:`NoChoicesError`,
      :class:`NoContentError`
"""

from .base.errors import (
    DecodeError,
    ErrorCode,
    GPTError,
    NoChoicesError,
    NoContentError,
    ResponseError,
    TransportError,
)
from .base.logging import configure_logger
from .base.models import (
    ChatDeltaResponse,
    ChatResponse,
    CompletionResponse,
    Configuration,
    CustomModel,
    EndPoint,
    Message,
    Model,
    Usage,
    custom,
    resolve,
)
from .base.streaming import StreamResponse
from .client import GPTClient

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "GPTClient",
    "Model",
    "CustomModel",
    "custom",
    "resolve",
    "EndPoint",
    "Configuration",
    "Message",
    "CompletionResponse",
    "ChatResponse",
    "ChatDeltaResponse",
    "Usage",
    "StreamResponse",
    "configure_logger",
    "GPTError",
    "ErrorCode",
    "TransportError",
    "ResponseError",
    "DecodeError",
    "NoChoicesError",
    "NoContentError",
]
