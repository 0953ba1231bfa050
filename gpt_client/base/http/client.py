"""HTTP client construction for the client facade.

Purpose:
    Build the ``httpx.AsyncClient`` used when the caller does not inject one.
    Timeouts derive exclusively from :func:`get_timeout_config`; no numeric
    literals are introduced here.

External dependencies:
    - ``httpx`` for the underlying asynchronous HTTP client.

Lifecycle & cleanup:
    - A client created here is owned by the facade that requested it and is
      closed by ``GPTClient.aclose()``. Async clients are bound to the event
      loop that first uses them, so they are not pooled process-wide.
"""

from __future__ import annotations

from typing import Optional

import httpx

from ..timeouts import get_timeout_config


def create_async_client(
    base_url: Optional[str] = None,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """Return a new ``httpx.AsyncClient`` configured with the shared timeouts.

    Parameters:
        base_url: Optional API base URL set on the client. Requests built by
            the request builder carry absolute URLs, so this is informational.
        transport: Optional transport override (``httpx.MockTransport`` in
            tests, a proxy-aware transport in applications).

    Returns:
        A fresh ``httpx.AsyncClient``; the caller owns and must close it.
    """
    kwargs = {"timeout": get_timeout_config().to_httpx()}
    if base_url:
        kwargs["base_url"] = base_url
    if transport is not None:
        kwargs["transport"] = transport
    return httpx.AsyncClient(**kwargs)


__all__ = ["create_async_client"]
