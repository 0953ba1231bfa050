"""gpt-client command line (package entrypoint).

Wires argument parsing to the async action handlers in ``cli_actions``.

Public API re-exports:
- ``main``: CLI entrypoint callable
"""

from __future__ import annotations

import asyncio
import sys
from typing import Optional

from ..base.logging import configure_logger
from .cli_actions import handle_chat, handle_complete
from .cli_parser import build_parser


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entrypoint.

    Parameters
    ----------
    argv: Optional[list[str]]
        Argument vector; when ``None`` uses ``sys.argv[1:]``.

    Returns
    -------
    int
        Process exit code (0 success, non-zero on error).
    """
    args = build_parser().parse_args(list(sys.argv[1:] if argv is None else argv))
    if args.log_level:
        configure_logger(level=args.log_level)
    if args.cmd == "chat":
        return asyncio.run(handle_chat(args))
    return asyncio.run(handle_complete(args))


__all__ = ["main"]
