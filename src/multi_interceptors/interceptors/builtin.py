"""Interceptors wired into the ``fooClient`` pipeline."""

from __future__ import annotations

from multi_interceptors.interceptors.headers import (
    RandomTokenHeaderInterceptor,
    StaticHeaderInterceptor,
)

AUTH_TOKEN_HEADER = "X-Auth-Token"
AUTH_TOKEN_VALUE = "mockedTokenValue"
TRACKING_ID_HEADER = "X-Tracking-ID"
LIBRARY_HEADER = "X-Library"
LIBRARY_VALUE = "libValue"


class AuthTokenInterceptor(StaticHeaderInterceptor):
    """Adds the mocked auth token header."""

    def __init__(self):
        super().__init__(AUTH_TOKEN_HEADER, AUTH_TOKEN_VALUE)


class TrackingIdInterceptor(RandomTokenHeaderInterceptor):
    """Adds a per-request tracking id."""

    def __init__(self):
        super().__init__(TRACKING_ID_HEADER)


class LibraryProvidedInterceptor(StaticHeaderInterceptor):
    """Header contributed by a shared library."""

    def __init__(self):
        super().__init__(LIBRARY_HEADER, LIBRARY_VALUE)
