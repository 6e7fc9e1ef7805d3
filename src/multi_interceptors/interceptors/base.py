from __future__ import annotations

from abc import ABC, abstractmethod

from multi_interceptors.types import RequestTemplate


class RequestInterceptor(ABC):
    """Mutates an outgoing request before the client sends it.

    Implementations hold only read-only configuration captured at
    construction, must not block, and must not keep a reference to the
    request after ``apply`` returns.
    """

    @abstractmethod
    def apply(self, request: RequestTemplate) -> None:
        """Mutate ``request`` in place.

        Args:
            request: The request about to be transmitted.

        Raises:
            InterceptorFailure: If the interceptor cannot mutate the request.
        """
