"""Startup wiring for the ``fooClient`` interceptor pipeline.

The composite is built once when :class:`FooClientConfiguration` is created
and that same instance is handed to every client it creates. Build the
configuration once at application startup and pass it where clients are
needed.
"""

from __future__ import annotations

import dataclasses

from multi_interceptors.client.config import ClientConfig
from multi_interceptors.client.foo_client import FOO_CLIENT_NAME, FooClient
from multi_interceptors.interceptors import (
    AuthTokenInterceptor,
    CompositeRequestInterceptor,
    LibraryProvidedInterceptor,
    TrackingIdInterceptor,
)


def build_composite_interceptor() -> CompositeRequestInterceptor:
    return CompositeRequestInterceptor(
        AuthTokenInterceptor(), TrackingIdInterceptor(), LibraryProvidedInterceptor()
    )


class FooClientConfiguration:
    """Holds the single composite interceptor registered for ``fooClient``."""

    def __init__(self, config: ClientConfig):
        if config.name != FOO_CLIENT_NAME:
            config = dataclasses.replace(config, name=FOO_CLIENT_NAME)
        self.config = config
        self._interceptor = build_composite_interceptor()

    @property
    def interceptor(self) -> CompositeRequestInterceptor:
        return self._interceptor

    def create_client(self) -> FooClient:
        return FooClient(self.config, self._interceptor)
