"""Request construction: endpoint + body + configuration -> ``httpx.Request``.

Pure construction with no network I/O, so the outgoing request can be
inspected directly in unit tests.
"""
from __future__ import annotations

import logging

import httpx

from . import codec
from .constants import JSON_CONTENT_TYPE
from .logging import LogContext, get_logger, log_event
from .models import Configuration, EndPoint, RequestBody, RequestEnvelope, resolve

_logger = get_logger("gpt_client.request")


def build_headers(api_key: str) -> dict[str, str]:
    """Return the headers sent with every request."""
    return {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": JSON_CONTENT_TYPE,
    }


def build_url(base_url: str, endpoint: EndPoint) -> str:
    return f"{base_url.rstrip('/')}/{endpoint.path}"


def build_envelope(
    endpoint: EndPoint,
    body: RequestBody,
    *,
    stream: bool,
    configuration: Configuration,
) -> RequestEnvelope:
    """Compose the request envelope for ``endpoint``.

    The configured model wins; otherwise the endpoint's default model is used.
    """
    model = configuration.model if configuration.model is not None else endpoint.default_model
    return RequestEnvelope(
        model=resolve(model),
        max_tokens=configuration.max_tokens,
        temperature=configuration.temperature,
        stream=stream,
        body=body,
    )


def build_request(
    endpoint: EndPoint,
    body: RequestBody,
    *,
    stream: bool,
    configuration: Configuration,
    api_key: str,
    base_url: str,
) -> httpx.Request:
    """Return a ready-to-send POST request.

    Parameters:
        endpoint: Target route; supplies the path and the default model.
        body: Endpoint-specific payload (prompt or message list).
        stream: Whether to ask the server for an event stream.
        configuration: Model/temperature/max-tokens settings read as-is.
        api_key: Bearer token.
        base_url: API root the endpoint path is appended to.
    """
    envelope = build_envelope(endpoint, body, stream=stream, configuration=configuration)
    url = build_url(base_url, endpoint)
    content = codec.encode(envelope)
    ctx = LogContext(endpoint=endpoint.path, model=envelope.model)
    log_event(_logger, "request.build", ctx, url=url, stream=stream)
    log_event(_logger, "request.body", ctx, level=logging.DEBUG, body=content.decode("utf-8"))
    return httpx.Request("POST", url, headers=build_headers(api_key), content=content)


__all__ = ["build_request", "build_envelope", "build_headers", "build_url"]
