"""Unified timeout configuration for the HTTP layer.

The client enforces no timeouts of its own: a call waits as long as the
underlying ``httpx`` client lets it. This module centralizes the values handed
to that client so they are configured in one place.

Key Components
--------------
TimeoutConfig
    Frozen dataclass of per-phase timeouts (seconds). ``None`` disables a
    phase's timeout.

get_timeout_config()
    Returns a process-cached configuration, parsing environment overrides on
    first use only. Supported environment variables (all optional):
        GPT_CLIENT_TIMEOUT_CONNECT_SECONDS
        GPT_CLIENT_TIMEOUT_READ_SECONDS
        GPT_CLIENT_TIMEOUT_WRITE_SECONDS
        GPT_CLIENT_TIMEOUT_POOL_SECONDS

reset_timeout_cache()
    Drop the cached value so the next call re-reads the environment.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

import httpx


@dataclass(frozen=True)
class TimeoutConfig:
    """Container for normalized timeout values (seconds).

    Attributes:
        connect_seconds: Establishing the TCP/TLS connection.
        read_seconds: Waiting for the next chunk of the body. For streaming
            calls this is the idle time allowed between two lines.
        write_seconds: Sending the request body.
        pool_seconds: Waiting for a free connection from the pool.
    """

    connect_seconds: Optional[float] = 10.0
    read_seconds: Optional[float] = 60.0
    write_seconds: Optional[float] = 30.0
    pool_seconds: Optional[float] = 10.0

    def to_httpx(self) -> httpx.Timeout:
        """Return the equivalent ``httpx.Timeout``."""
        return httpx.Timeout(
            connect=self.connect_seconds,
            read=self.read_seconds,
            write=self.write_seconds,
            pool=self.pool_seconds,
        )


_CACHED: TimeoutConfig | None = None


def _parse_env_float(name: str, default: float | None) -> float | None:
    """Parse an environment variable as a positive float with a fallback default."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached `TimeoutConfig` instance."""
    global _CACHED  # noqa: PLW0603 - documented module cache
    if _CACHED is not None:
        return _CACHED
    defaults = TimeoutConfig()
    _CACHED = TimeoutConfig(
        connect_seconds=_parse_env_float("GPT_CLIENT_TIMEOUT_CONNECT_SECONDS", defaults.connect_seconds),
        read_seconds=_parse_env_float("GPT_CLIENT_TIMEOUT_READ_SECONDS", defaults.read_seconds),
        write_seconds=_parse_env_float("GPT_CLIENT_TIMEOUT_WRITE_SECONDS", defaults.write_seconds),
        pool_seconds=_parse_env_float("GPT_CLIENT_TIMEOUT_POOL_SECONDS", defaults.pool_seconds),
    )
    return _CACHED


def reset_timeout_cache() -> None:
    """Forget the cached configuration (used by tests and long-lived shells)."""
    global _CACHED  # noqa: PLW0603
    _CACHED = None


__all__ = [
    "TimeoutConfig",
    "get_timeout_config",
    "reset_timeout_cache",
]
