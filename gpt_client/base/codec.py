"""Wire codec: request envelopes to JSON bytes, JSON payloads to typed envelopes.

Encoding rules:
    - Keys are snake_case on the wire; any camelCase key that reaches the
      codec (for instance from a caller-built body) is converted.
    - ``model`` and ``stream`` are always emitted.
    - ``max_tokens`` and ``temperature`` are omitted when unset, never sent
      as ``null``. The same holds for a message without content.
    - The endpoint body is merged into the top-level object, not nested.

Decoding parses JSON into a pydantic shape. Any mismatch raises
:class:`DecodeError` with the raw payload attached.
"""
from __future__ import annotations

import json
import re
from typing import Any, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from .errors import DecodeError
from .models import RequestEnvelope

T = TypeVar("T", bound=BaseModel)

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])([A-Z])")


def to_snake_case(name: str) -> str:
    """Convert ``camelCase`` to ``snake_case``; snake_case input is unchanged."""
    return _CAMEL_BOUNDARY.sub(r"_\1", name).lower()


def _snake_keys(value: Any) -> Any:
    if isinstance(value, dict):
        return {to_snake_case(str(k)): _snake_keys(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_snake_keys(v) for v in value]
    return value


def envelope_to_dict(envelope: RequestEnvelope) -> dict[str, Any]:
    """Return the flattened JSON object for ``envelope``."""
    data: dict[str, Any] = {"model": envelope.model}
    if envelope.max_tokens is not None:
        data["max_tokens"] = envelope.max_tokens
    if envelope.temperature is not None:
        data["temperature"] = envelope.temperature
    data["stream"] = envelope.stream
    data.update(envelope.body.model_dump(exclude_none=True))
    return _snake_keys(data)


def encode(envelope: RequestEnvelope) -> bytes:
    """Serialize ``envelope`` to UTF-8 JSON bytes."""
    return json.dumps(envelope_to_dict(envelope), ensure_ascii=False).encode("utf-8")


def decode(data: Union[bytes, str], shape: Type[T]) -> T:
    """Parse ``data`` into ``shape``.

    Raises:
        DecodeError: If the payload is not valid JSON or does not match the
            shape (missing required field, type mismatch).
    """
    try:
        return shape.model_validate_json(data)
    except ValidationError as e:
        payload = data.decode("utf-8", errors="replace") if isinstance(data, bytes) else data
        raise DecodeError(payload=payload, detail=_summarize(e), raw=e) from e


def _summarize(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        loc = ".".join(str(p) for p in item.get("loc", ())) or "<root>"
        parts.append(f"{loc}: {item.get('msg')}")
    return "; ".join(parts)


__all__ = ["encode", "decode", "envelope_to_dict", "to_snake_case"]
