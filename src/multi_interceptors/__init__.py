"""Composable request interceptors for outgoing HTTP client calls."""

from multi_interceptors.exceptions import InterceptorFailure
from multi_interceptors.interceptors import (
    AuthTokenInterceptor,
    CompositeRequestInterceptor,
    LibraryProvidedInterceptor,
    RandomTokenHeaderInterceptor,
    RequestInterceptor,
    StaticHeaderInterceptor,
    TrackingIdInterceptor,
)
from multi_interceptors.types import RequestTemplate

__all__ = [
    "AuthTokenInterceptor",
    "CompositeRequestInterceptor",
    "InterceptorFailure",
    "LibraryProvidedInterceptor",
    "RandomTokenHeaderInterceptor",
    "RequestInterceptor",
    "RequestTemplate",
    "StaticHeaderInterceptor",
    "TrackingIdInterceptor",
]
