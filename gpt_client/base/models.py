"""
Domain models (DTOs) public surface.

This module re-exports the implementations under
``gpt_client.base.models_parts`` so callers have one stable import path.
"""

from .models_parts.configuration import Configuration
from .models_parts.endpoint import EndPoint
from .models_parts.envelopes import (
    ChatBody,
    ChatChoice,
    ChatDeltaChoice,
    ChatDeltaResponse,
    ChatResponse,
    CompletionBody,
    CompletionChoice,
    CompletionResponse,
    RequestBody,
    RequestEnvelope,
    ResponseEnvelope,
    Usage,
)
from .models_parts.message import Message
from .models_parts.model import CustomModel, Model, ModelRef, custom, resolve

__all__ = [
    "Configuration",
    "EndPoint",
    "Message",
    "Model",
    "CustomModel",
    "ModelRef",
    "custom",
    "resolve",
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
