"""
Normalized client error codes (taxonomy).

Defines the `ErrorCode` enumeration attached to every `GPTError` and the
HTTP status map used by `ResponseError`. Values are lowercase snake_case and
are considered a stable public contract for logging and analytics.
"""
from __future__ import annotations

from enum import Enum
from typing import Dict


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    # Pipeline failures
    INVALID_RESPONSE_SHAPE = "invalid_response_shape"
    DECODE = "decode"
    NO_CHOICES = "no_choices"
    NO_CONTENT = "no_content"

    # HTTP status / network categories
    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    TIMEOUT = "timeout"
    TRANSIENT = "transient"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    SERVER_ERROR = "server_error"
    UNAVAILABLE = "unavailable"
    UNKNOWN = "unknown"


_HTTP_STATUS_MAP: Dict[int, ErrorCode] = {
    400: ErrorCode.VALIDATION,
    401: ErrorCode.AUTH,
    403: ErrorCode.AUTH,
    404: ErrorCode.NOT_FOUND,
    408: ErrorCode.TIMEOUT,
    409: ErrorCode.CONFLICT,
    422: ErrorCode.VALIDATION,
    429: ErrorCode.RATE_LIMIT,
    500: ErrorCode.SERVER_ERROR,
    502: ErrorCode.TRANSIENT,
    503: ErrorCode.UNAVAILABLE,
    504: ErrorCode.TIMEOUT,
}


def code_for_status(status_code: int) -> ErrorCode:
    """Map an HTTP status to an :class:`ErrorCode`.

    Unmapped 5xx statuses fall back to ``SERVER_ERROR``; anything else that is
    not listed maps to ``UNKNOWN``.
    """
    if status_code in _HTTP_STATUS_MAP:
        return _HTTP_STATUS_MAP[status_code]
    if 500 <= status_code < 600:
        return ErrorCode.SERVER_ERROR
    return ErrorCode.UNKNOWN


__all__ = ["ErrorCode", "code_for_status"]
