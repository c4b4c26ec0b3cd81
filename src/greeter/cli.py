"""Command line interface for greeter."""

from __future__ import annotations

import argparse
import os
from typing import Optional

from . import __version__
from .core import DEFAULT_USER, greet


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="greeter", description="Print a typed greeting."
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    sub = parser.add_subparsers(dest="command")

    p_greet = sub.add_parser("greet", help="Print a greeting for NAME.")
    p_greet.add_argument("name", nargs="?", default=DEFAULT_USER)

    # HOST/PORT are resolved in _serve so greeting never touches the environment
    p_serve = sub.add_parser("serve", help="Run the HTTP API under uvicorn.")
    p_serve.add_argument("--host", default=None, help="default: $HOST or 127.0.0.1")
    p_serve.add_argument("--port", type=int, default=None, help="default: $PORT or 8000")

    return parser


def _serve(host: Optional[str], port: Optional[int]) -> None:
    import uvicorn

    from .server import configure_logging

    configure_logging()
    uvicorn.run(
        "greeter.server:app",
        host=host or os.getenv("HOST", "127.0.0.1"),
        port=port if port is not None else int(os.getenv("PORT", "8000")),
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == "serve":
        _serve(args.host, args.port)
        return 0

    # no subcommand: greet the built-in user
    name = args.name if args.command == "greet" else DEFAULT_USER
    print(greet(name))
    return 0
