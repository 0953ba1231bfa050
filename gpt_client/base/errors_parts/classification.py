"""
Error classification helpers mapping statuses and exceptions to ErrorCode values.

Implements a best-effort classifier for exceptions raised underneath the
client (``httpx`` transport failures, timeouts). The HTTP status map lives
next to `ErrorCode` and is re-exported here.
"""
from __future__ import annotations

import asyncio
from typing import Optional

import httpx

from .error_code import _HTTP_STATUS_MAP, ErrorCode, code_for_status
from .gpt_error import GPTError


def _extract_status(exc: BaseException) -> Optional[int]:
    """Attempt to extract an HTTP status code from an exception.

    Supported attribute shapes (checked in order):
    - ``exc.status_code``
    - ``exc.response.status_code``
    Returns ``None`` if no valid status can be found.
    """
    val = getattr(exc, "status_code", None)
    if isinstance(val, int) and 100 <= val < 600:
        return val
    # httpx raises RuntimeError on `.response` for request-only errors.
    try:
        resp = getattr(exc, "response", None)
    except RuntimeError:
        resp = None
    if resp is not None:
        sc = getattr(resp, "status_code", None)
        if isinstance(sc, int) and 100 <= sc < 600:
            return sc
    return None


def classify_exception(exc: BaseException) -> ErrorCode:
    """Classify an exception into a normalized :class:`ErrorCode`.

    Precedence:
        1. GPTError passthrough.
        2. Timeout exceptions (builtin, asyncio, httpx).
        3. HTTP status mapping.
        4. Other ``httpx`` transport failures are ``TRANSIENT``.
        5. ``UNKNOWN`` fallback.
    """
    if isinstance(exc, GPTError):
        return exc.code
    if isinstance(exc, (TimeoutError, asyncio.TimeoutError, httpx.TimeoutException)):
        return ErrorCode.TIMEOUT
    status = _extract_status(exc)
    if status is not None:
        return code_for_status(status)
    if isinstance(exc, httpx.TransportError):
        return ErrorCode.TRANSIENT
    return ErrorCode.UNKNOWN


__all__ = [
    "classify_exception",
    "code_for_status",
    "_extract_status",
    "_HTTP_STATUS_MAP",
]
