from __future__ import annotations

import argparse
from importlib import metadata

__all__ = ["DISTRIBUTION", "register_parser", "run"]

DISTRIBUTION = "multi-interceptors"


def register_parser(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser("version", help=f"Print the installed {DISTRIBUTION} version.")
    parser.set_defaults(handler=run)


def run(_args: argparse.Namespace) -> int:
    try:
        installed = metadata.version(DISTRIBUTION)
    except metadata.PackageNotFoundError:
        installed = "unknown (not installed)"
    print(f"{DISTRIBUTION} {installed}")
    return 0
