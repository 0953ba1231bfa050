"""CLI action handlers.

Purpose
-------
Subcommand handlers for ``gpt-client``, kept apart from argument parsing so
the presentation layer stays thin. Handlers receive a client factory and I/O
callables, which lets tests drive them against ``httpx.MockTransport``
without touching the network or the terminal.

Fallback & Error Semantics
--------------------------
- A missing API key prints a JSON error to stderr and returns exit code 2.
- Any :class:`GPTError` during a call prints a JSON error (code, message and,
  for HTTP failures, the status) to stderr and returns exit code 1.
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Callable, Dict, Optional, TextIO

from ..base.constants import MISSING_API_KEY_ERROR
from ..base.errors import GPTError, ResponseError
from ..client import GPTClient
from ..config.defaults import CLI_CLEAR_COMMAND, CLI_EXIT_COMMANDS, CLI_HISTORY_COMMAND

ClientFactory = Callable[..., GPTClient]
InputFn = Callable[[str], str]


def client_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """Collect the configuration overrides given on the command line."""
    return {
        "model": args.model,
        "temperature": args.temperature,
        "max_tokens": args.max_tokens,
        "base_url": args.base_url,
    }


def _error_payload(err: GPTError) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"error": err.message, "code": err.code.value}
    if isinstance(err, ResponseError):
        payload["status"] = err.status_code
    return payload


def _make_client(factory: ClientFactory, err: TextIO, **kwargs: Any) -> Optional[GPTClient]:
    try:
        return factory(**kwargs)
    except ValueError as e:
        if str(e) != MISSING_API_KEY_ERROR:
            raise
        err.write(json.dumps({"error": MISSING_API_KEY_ERROR}) + "\n")
        return None


async def handle_complete(
    args: argparse.Namespace,
    *,
    client_factory: ClientFactory = GPTClient.from_env,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> int:
    """Run one completion and print the result.

    Returns
    -------
    int
        0 on success, 1 on a client error, 2 when no API key is configured.
    """
    out = out or sys.stdout
    err = err or sys.stderr
    client = _make_client(client_factory, err, **client_overrides(args))
    if client is None:
        return 2
    async with client:
        try:
            if args.stream:
                async with client.complete_stream(args.prompt) as stream:
                    async for piece in stream:
                        out.write(piece)
                        out.flush()
                out.write("\n")
            else:
                response = await client.complete(args.prompt)
                if args.json:
                    out.write(response.model_dump_json() + "\n")
                else:
                    out.write((response.text or "") + "\n")
        except GPTError as e:
            err.write(json.dumps(_error_payload(e)) + "\n")
            return 1
    return 0


async def handle_chat(
    args: argparse.Namespace,
    *,
    client_factory: ClientFactory = GPTClient.from_env,
    read_input: InputFn = input,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> int:
    """Interactive chat loop.

    Commands: ``/clear`` empties history, ``/history`` prints it, ``/exit``
    (or ``/quit``, or end of input) leaves. A failed turn is reported and the
    loop continues; history is unchanged by failures.
    """
    out = out or sys.stdout
    err = err or sys.stderr
    client = _make_client(
        client_factory,
        err,
        remember_replies=args.remember_replies,
        **client_overrides(args),
    )
    if client is None:
        return 2
    async with client:
        while True:
            try:
                line = read_input("> ")
            except EOFError:
                break
            text = line.strip()
            if not text:
                continue
            if text in CLI_EXIT_COMMANDS:
                break
            if text == CLI_CLEAR_COMMAND:
                client.clear_history()
                continue
            if text == CLI_HISTORY_COMMAND:
                for entry in client.historical():
                    out.write(entry + "\n")
                continue
            try:
                if args.stream:
                    async with client.chat_stream(text) as stream:
                        async for piece in stream:
                            out.write(piece)
                            out.flush()
                    out.write("\n")
                else:
                    out.write(await client.chat(text) + "\n")
            except GPTError as e:
                err.write(json.dumps(_error_payload(e)) + "\n")
    return 0


__all__ = ["handle_complete", "handle_chat", "client_overrides"]
