"""Headers command.

Applies the fooClient composite interceptor to an empty request and prints
the resulting header mapping.
"""
from __future__ import annotations

import argparse
import json

from multi_interceptors.client.configuration import build_composite_interceptor
from multi_interceptors.types import RequestTemplate

__all__ = ["register_parser", "run"]


def register_parser(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser(
        "headers",
        help="Show the headers the interceptor pipeline adds to a request.",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Indent the JSON output.",
    )
    parser.set_defaults(handler=run)


def run(args: argparse.Namespace) -> int:
    request = RequestTemplate()
    build_composite_interceptor().apply(request)
    indent = 2 if getattr(args, "pretty", False) else None
    print(json.dumps(request.headers, indent=indent))
    return 0
