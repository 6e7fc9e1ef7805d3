"""Command line entry point for ``multi-interceptors``.

Each module in :mod:`multi_interceptors.cli.commands` adds one subcommand
through ``register_parser`` and stores its ``run`` function as ``handler``.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from multi_interceptors.cli.commands import call, headers, version

COMMANDS = (headers, call, version)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="multi-interceptors",
        description="Send requests through the fooClient interceptor pipeline.",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v",
        "--verbose",
        dest="log_level",
        action="store_const",
        const=logging.DEBUG,
        help="Log every request and response (overrides logging.level).",
    )
    verbosity.add_argument(
        "-q",
        "--quiet",
        dest="log_level",
        action="store_const",
        const=logging.WARNING,
        help="Log warnings and errors only (overrides logging.level).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    for command in COMMANDS:
        command.register_parser(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    return int(args.handler(args) or 0)


__all__ = ["COMMANDS", "build_parser", "main"]
