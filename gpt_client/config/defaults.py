"""gpt_client.config.defaults
==========================

Central place for small, stable default values used across the package and
the CLI. These defaults can be overridden via environment variables or an
external configuration file.

This module intentionally avoids importing from other package modules to
prevent circular dependencies. Only plain constants live here.
"""

from __future__ import annotations

# ---- API ----
DEFAULT_BASE_URL = "https://api.openai.com/v1"

# ---- CLI ----
CLI_PROG_NAME = "gpt-client"
CLI_EXIT_COMMANDS = ("/exit", "/quit")
CLI_CLEAR_COMMAND = "/clear"
CLI_HISTORY_COMMAND = "/history"

# ---- Config file / dotenv ----
CONFIG_FILE_ENV = "GPT_CLIENT_CONFIG_FILE"
DOTENV_FILE_ENV = "DOTENV_FILE"
DEFAULT_DOTENV_FILE = ".env"

__all__ = [
    "DEFAULT_BASE_URL",
    "CLI_PROG_NAME",
    "CLI_EXIT_COMMANDS",
    "CLI_CLEAR_COMMAND",
    "CLI_HISTORY_COMMAND",
    "CONFIG_FILE_ENV",
    "DOTENV_FILE_ENV",
    "DEFAULT_DOTENV_FILE",
]
