"""Pytest configuration for the gpt_client test suite.

Async tests run on the AnyIO pytest plugin (installed with ``anyio``) using
the asyncio backend. HTTP is faked with ``httpx.MockTransport``; nothing in
this suite touches the network.
"""

from __future__ import annotations

from typing import Iterator

import pytest

from gpt_client.base.timeouts import reset_timeout_cache
from gpt_client.config import reset_config_cache


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    """Keep host credentials, config files and dotenv files out of every test."""
    for name in (
        "OPENAI_API_KEY",
        "GPT_API_KEY",
        "API_KEY",
        "OPENAI_BASE_URL",
        "OPENAI_MODEL",
        "OPENAI_TEMPERATURE",
        "OPENAI_MAX_TOKENS",
        "GPT_CLIENT_CONFIG_FILE",
        "GPT_CLIENT_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DOTENV_FILE", str(tmp_path / "missing.env"))
    reset_config_cache()
    reset_timeout_cache()
    yield
    reset_config_cache()
    reset_timeout_cache()
