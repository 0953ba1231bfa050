"""Unified configuration layer for the client.

Goals
-----
* Centralize defaults (base URL).
* Merge sources in a predictable order (later wins):
    1. Built-in defaults
    2. Optional external config file (JSON or YAML) named by GPT_CLIENT_CONFIG_FILE
    3. Environment variables (OPENAI_BASE_URL, OPENAI_MODEL,
       OPENAI_TEMPERATURE, OPENAI_MAX_TOKENS, OPENAI_API_KEY and aliases)
    4. In-code overrides passed to the helper
* Provide a single call site: ``get_client_config()``.

External Config File (Optional)
-------------------------------
JSON is tried first, then YAML::

    base_url: https://api.openai.com/v1
    model: gpt-4
    temperature: 0.2
    max_tokens: 256

Values are returned as read; type validation happens when they are loaded
into :class:`gpt_client.base.models.Configuration`.

Public API
----------
* get_client_config(overrides: dict | None = None) -> dict
* reset_config_cache() -> None
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .defaults import CONFIG_FILE_ENV, DEFAULT_BASE_URL, DEFAULT_DOTENV_FILE, DOTENV_FILE_ENV
from .env import is_placeholder, resolve_api_key, setting_overrides

DEFAULTS: Dict[str, Any] = {"base_url": DEFAULT_BASE_URL}

KNOWN_FIELDS = ("api_key", "base_url", "model", "temperature", "max_tokens")

_FILE_CACHE: Optional[Dict[str, Any]] = None
_DOTENV_LOADED = False


def _load_dotenv_once() -> None:
    """Lightweight .env loader.

    Parses KEY=VALUE lines, ignoring comments and blank lines. Safe to call
    multiple times. Overrides existing environment variables only if their
    current values appear to be placeholders.
    """
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    path = os.getenv(DOTENV_FILE_ENV, DEFAULT_DOTENV_FILE)
    if not os.path.isfile(path):
        _DOTENV_LOADED = True
        return
    try:
        with open(path, "r", encoding="utf-8") as fh:
            for line in fh:
                line = line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                k, v = line.split("=", 1)
                k = k.strip()
                v = v.strip().strip('"').strip("'")
                if k and (k not in os.environ or is_placeholder(os.environ.get(k))):
                    os.environ[k] = v
    finally:
        _DOTENV_LOADED = True


def _load_external_config() -> Dict[str, Any]:
    global _FILE_CACHE
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    path = os.getenv(CONFIG_FILE_ENV)
    if not path or not Path(path).exists():
        _FILE_CACHE = {}
        return _FILE_CACHE
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError:
            data = {}
    if not isinstance(data, dict):
        data = {}
    _FILE_CACHE = {k: v for k, v in data.items() if k in KNOWN_FIELDS}
    return _FILE_CACHE


def get_client_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return the merged client configuration.

    Merge order (later wins): defaults -> external config -> env vars -> overrides.
    ``None`` values in ``overrides`` are ignored.
    """
    _load_dotenv_once()
    cfg: Dict[str, Any] = dict(DEFAULTS)
    cfg |= _load_external_config()
    cfg |= setting_overrides()
    api_key, _ = resolve_api_key()
    if api_key:
        cfg["api_key"] = api_key
    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}
    return cfg


def reset_config_cache() -> None:
    """Forget cached file contents and the dotenv marker (tests, shells)."""
    global _FILE_CACHE, _DOTENV_LOADED
    _FILE_CACHE = None
    _DOTENV_LOADED = False


__all__ = [
    "get_client_config",
    "reset_config_cache",
    "DEFAULTS",
    "KNOWN_FIELDS",
]
