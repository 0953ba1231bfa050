"""Base shared constants for the request pipeline.

Central location to avoid scattering protocol literals across modules.

# pragma: allowlist secret
"""
from __future__ import annotations

# Server-sent event framing
SSE_DATA_PREFIX = "data: "
SSE_DONE_SENTINEL = "[DONE]"

# Only this status is treated as success
HTTP_OK = 200

JSON_CONTENT_TYPE = "application/json"

# Missing credential sentinel
MISSING_API_KEY_ERROR = "missing_api_key"  # pragma: allowlist secret - generic placeholder string, not a real secret

__all__ = [
    "SSE_DATA_PREFIX",
    "SSE_DONE_SENTINEL",
    "HTTP_OK",
    "JSON_CONTENT_TYPE",
    "MISSING_API_KEY_ERROR",
]
