"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `gpt_client.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .gpt_error import (
    DecodeError,
    GPTError,
    NoChoicesError,
    NoContentError,
    ResponseError,
    TransportError,
)
from .classification import classify_exception, code_for_status

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
