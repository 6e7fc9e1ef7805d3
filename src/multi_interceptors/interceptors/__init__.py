"""Request interceptors applied to outgoing client requests."""

from __future__ import annotations

from multi_interceptors.interceptors.base import RequestInterceptor
from multi_interceptors.interceptors.builtin import (
    AUTH_TOKEN_HEADER,
    AUTH_TOKEN_VALUE,
    LIBRARY_HEADER,
    LIBRARY_VALUE,
    TRACKING_ID_HEADER,
    AuthTokenInterceptor,
    LibraryProvidedInterceptor,
    TrackingIdInterceptor,
)
from multi_interceptors.interceptors.composite import CompositeRequestInterceptor
from multi_interceptors.interceptors.headers import (
    RandomTokenHeaderInterceptor,
    StaticHeaderInterceptor,
)

__all__ = [
    # Base classes
    "RequestInterceptor",
    "CompositeRequestInterceptor",
    # Header variants
    "StaticHeaderInterceptor",
    "RandomTokenHeaderInterceptor",
    # fooClient pipeline
    "AuthTokenInterceptor",
    "TrackingIdInterceptor",
    "LibraryProvidedInterceptor",
    "AUTH_TOKEN_HEADER",
    "AUTH_TOKEN_VALUE",
    "TRACKING_ID_HEADER",
    "LIBRARY_HEADER",
    "LIBRARY_VALUE",
]
