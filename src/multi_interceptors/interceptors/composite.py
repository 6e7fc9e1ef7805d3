from __future__ import annotations

from collections.abc import Iterable, Iterator

from multi_interceptors.interceptors.base import RequestInterceptor
from multi_interceptors.types import RequestTemplate


class CompositeRequestInterceptor(RequestInterceptor):
    """Runs a fixed sequence of interceptors against the same request.

    Interceptors run in construction order. A later interceptor sees the
    headers set by earlier ones and wins on a name collision. The first
    exception aborts the chain and propagates unchanged; headers already set
    stay on the request.

    Example:
        composite = CompositeRequestInterceptor(
            AuthTokenInterceptor(), TrackingIdInterceptor(), LibraryProvidedInterceptor()
        )
        composite.apply(request)
    """

    def __init__(self, *interceptors: RequestInterceptor):
        self._interceptors: tuple[RequestInterceptor, ...] = tuple(interceptors)

    @classmethod
    def of(cls, interceptors: Iterable[RequestInterceptor]) -> CompositeRequestInterceptor:
        """Build a composite from any iterable of interceptors."""
        return cls(*interceptors)

    @property
    def interceptors(self) -> tuple[RequestInterceptor, ...]:
        return self._interceptors

    def __len__(self) -> int:
        return len(self._interceptors)

    def __iter__(self) -> Iterator[RequestInterceptor]:
        return iter(self._interceptors)

    def apply(self, request: RequestTemplate) -> None:
        for interceptor in self._interceptors:
            interceptor.apply(request)

    def __repr__(self) -> str:
        inner = ", ".join(repr(i) for i in self._interceptors)
        return f"{type(self).__name__}({inner})"
