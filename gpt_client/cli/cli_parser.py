"""CLI parser construction for gpt-client.

This module wires subparsers but contains no execution logic. Subcommand
handlers live in ``cli_actions`` to keep files small and testable.
"""

from __future__ import annotations

import argparse

from ..config.defaults import CLI_PROG_NAME


def _str2bool(v: str | None) -> bool:
    """Best-effort conversion of common truthy/falsey strings to bool.

    When ``None`` (flag given without a value) this returns ``True``.
    """
    if v is None:
        return True
    val = v.strip().lower()
    if val in {"1", "t", "true", "y", "yes", "on"}:
        return True
    return False if val in {"0", "f", "false", "n", "no", "off"} else bool(val)


def add_stream_flags(parser: argparse.ArgumentParser) -> None:
    """Attach ``--stream``/``--no-stream`` flags to a parser.

    ``--stream`` accepts an optional boolean and defaults to ``True`` when
    given bare; ``--no-stream`` is the explicit negation.
    """
    grp = parser.add_mutually_exclusive_group()
    grp.add_argument("--stream", nargs="?", const=True, type=_str2bool, default=False)
    grp.add_argument("--no-stream", dest="stream", action="store_false")


def add_request_flags(parser: argparse.ArgumentParser) -> None:
    """Attach the flags that map onto the request configuration."""
    parser.add_argument("--model", default=None, help="Model id (defaults to the endpoint's default)")
    parser.add_argument("--temperature", type=float, default=None)
    parser.add_argument("--max-tokens", dest="max_tokens", type=int, default=None)
    parser.add_argument("--base-url", dest="base_url", default=None)
    add_stream_flags(parser)


def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level CLI parser and subcommands.

    Returns
    -------
    argparse.ArgumentParser
        Parser with ``complete`` and ``chat`` subcommands. No I/O occurs here.
    """
    p = argparse.ArgumentParser(prog=CLI_PROG_NAME, description="Completions and chat against an OpenAI-compatible API")
    p.add_argument("--log-level", dest="log_level", default=None, help="Client log level (e.g. DEBUG)")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_complete = sub.add_parser("complete", help="Run a single completion")
    p_complete.add_argument("--prompt", required=True)
    add_request_flags(p_complete)
    p_complete.add_argument("--json", action="store_true", help="Print the full response envelope as JSON")

    p_chat = sub.add_parser("chat", help="Interactive chat keeping conversation history")
    add_request_flags(p_chat)
    p_chat.add_argument("--remember-replies", dest="remember_replies", action="store_true")

    return p


__all__ = ["build_parser", "add_stream_flags", "add_request_flags"]
