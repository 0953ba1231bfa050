"""
Structured client exception types.

Every failure surfaced by the request pipeline is a `GPTError` carrying a
normalized `ErrorCode`. Subclasses add the fields specific to each failure:
the HTTP status and verbatim body for `ResponseError`, the raw payload for
`DecodeError`.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode, code_for_status


@dataclass(eq=False)
class GPTError(Exception):
    """Base class for all errors raised by the client.

    Attributes:
        message: Human-readable error message suitable for logging.
        code: Normalized :class:`ErrorCode` classification for the failure.
        raw: Optional original exception for diagnostics.
    """

    message: str
    code: ErrorCode = ErrorCode.UNKNOWN
    raw: Optional[BaseException] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.code.value}: {self.message}"


class TransportError(GPTError):
    """The HTTP layer failed to produce a usable HTTP response."""

    @classmethod
    def invalid_response_shape(cls, received: object) -> "TransportError":
        """Build the error raised when the HTTP client returns a non-HTTP object."""
        return cls(
            message=f"expected an HTTP response, got {type(received).__name__}",
            code=ErrorCode.INVALID_RESPONSE_SHAPE,
        )


class ResponseError(GPTError):
    """The server answered with a non-200 status.

    ``body_text`` is the response body text; it is not assumed to be JSON.
    For a buffered call it is the body verbatim. For a streamed call the
    body is read line by line and the lines are concatenated without a
    separator, so line breaks are not preserved.
    """

    def __init__(self, status_code: int, body_text: str) -> None:
        super().__init__(
            message=f"HTTP {status_code}: {body_text}",
            code=code_for_status(status_code),
        )
        self.status_code = status_code
        self.body_text = body_text

    @property
    def retryable(self) -> bool:
        """Advisory hint for callers; the client itself never retries."""
        return self.code in (ErrorCode.RATE_LIMIT, ErrorCode.TRANSIENT, ErrorCode.UNAVAILABLE, ErrorCode.TIMEOUT)


class DecodeError(GPTError):
    """A JSON payload did not match the expected response shape."""

    def __init__(self, payload: str, detail: str, raw: Optional[BaseException] = None) -> None:
        super().__init__(message=f"could not decode payload: {detail}", code=ErrorCode.DECODE, raw=raw)
        self.payload = payload
        self.detail = detail


class NoChoicesError(GPTError):
    """Successful response whose choice list is empty."""

    def __init__(self) -> None:
        super().__init__(message="response contained no choices", code=ErrorCode.NO_CHOICES)


class NoContentError(GPTError):
    """Successful response whose first choice carries no content."""

    def __init__(self) -> None:
        super().__init__(message="first choice has no content", code=ErrorCode.NO_CONTENT)


__all__ = [
    "GPTError",
    "TransportError",
    "ResponseError",
    "DecodeError",
    "NoChoicesError",
    "NoContentError",
]
