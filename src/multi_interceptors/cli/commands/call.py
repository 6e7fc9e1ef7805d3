"""Call command.

Sends ``GET /api/internal/foo`` through the configured fooClient and prints
the response body. Client records go to stderr in the configured format.
"""
from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Final

from multi_interceptors.client.configuration import FooClientConfiguration
from multi_interceptors.client.errors import ClientError
from multi_interceptors.client.foo_client import FOO_CLIENT_NAME
from multi_interceptors.config import ConfigError, load_config
from multi_interceptors.exceptions import InterceptorFailure
from multi_interceptors.observability.logging import configure_logging

__all__ = ["register_parser", "run"]

EXIT_SUCCESS: Final = 0
EXIT_ERROR: Final = 1


def register_parser(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser(
        "call",
        help="Call the internal foo endpoint.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  multi-interceptors call --config multi_interceptors.yaml
  FOO_BASE_URL=http://localhost:9000 multi-interceptors -v call --config config.yaml
        """,
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to a YAML configuration file (default: search standard locations).",
    )
    parser.set_defaults(handler=run)


async def _call(configuration: FooClientConfiguration) -> str:
    async with configuration.create_client() as client:
        return await client.call_internal_foo()


def run(args: argparse.Namespace) -> int:
    try:
        app_config = load_config(getattr(args, "config", None))
        client_config = app_config.client(FOO_CLIENT_NAME)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_ERROR

    log_level = getattr(args, "log_level", None) or app_config.logging.level_int
    log = configure_logging(
        log_format=app_config.logging.format,
        level=log_level,
        stream=sys.stderr,
    )
    configuration = FooClientConfiguration(client_config)
    try:
        body = asyncio.run(_call(configuration))
    except InterceptorFailure as exc:
        log.error("Interceptor pipeline for %s failed: %s", FOO_CLIENT_NAME, exc)
        return EXIT_ERROR
    except ClientError as exc:
        log.error("Call to %s failed: %s", FOO_CLIENT_NAME, exc)
        return EXIT_ERROR
    print(body)
    return EXIT_SUCCESS
