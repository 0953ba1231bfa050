"""Unified client error taxonomy public surface.

This module re-exports the implementations under
``gpt_client.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts import (
    DecodeError,
    ErrorCode,
    GPTError,
    NoChoicesError,
    NoContentError,
    ResponseError,
    TransportError,
    classify_exception,
    code_for_status,
)

__all__ = [
    "ErrorCode",
    "GPTError",
    "TransportError",
    "ResponseError",
    "DecodeError",
    "NoChoicesError",
    "NoContentError",
    "classify_exception",
    "code_for_status",
]
