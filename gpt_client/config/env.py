"""gpt_client.config.env
=====================

Environment variable names and helpers for the API credential and the other
per-setting overrides.

Design Notes
------------
- ``API_KEY_ENV_VARS`` lists the accepted credential variables with the
  canonical name first to establish precedence.
- Helpers never raise on unset variables; callers decide how to proceed.
"""

from __future__ import annotations

import os
from typing import Dict, Optional, Tuple

# Canonical first
API_KEY_ENV_VARS: Tuple[str, ...] = ("OPENAI_API_KEY", "GPT_API_KEY", "API_KEY")

# Config field -> environment variable
SETTING_ENV_MAP: Dict[str, str] = {
    "base_url": "OPENAI_BASE_URL",
    "model": "OPENAI_MODEL",
    "temperature": "OPENAI_TEMPERATURE",
    "max_tokens": "OPENAI_MAX_TOKENS",
}


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the provided string looks like a placeholder/test value.

    Heuristics: contains 'placeholder', 'changeme', 'example', or starts with
    'test_'. The check is case-insensitive and resilient to surrounding spaces.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return (
        "placeholder" in v
        or "changeme" in v
        or "example" in v
        or v.startswith("test_")
    )


def resolve_api_key() -> Tuple[Optional[str], Optional[str]]:
    """Resolve the API key from the process environment.

    Returns
    -------
    Tuple[Optional[str], Optional[str]]
        ``(value, env_var_used)`` for the first non-empty, non-placeholder
        variable in ``API_KEY_ENV_VARS``; ``(None, None)`` when nothing is set.
    """
    for name in API_KEY_ENV_VARS:
        val = os.environ.get(name)
        if val and not is_placeholder(val):
            return val, name
    return None, None


def setting_overrides() -> Dict[str, str]:
    """Return the raw (string) setting overrides present in the environment."""
    out: Dict[str, str] = {}
    for field, var in SETTING_ENV_MAP.items():
        val = os.getenv(var)
        if val:
            out[field] = val
    return out


__all__ = [
    "API_KEY_ENV_VARS",
    "SETTING_ENV_MAP",
    "is_placeholder",
    "resolve_api_key",
    "setting_overrides",
]
