from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class InterceptorFailure(Exception):
    """Raised by a request interceptor that cannot mutate the request.

    The composite interceptor never wraps or suppresses this error; it reaches
    the caller of ``apply`` unchanged.
    """

    message: str = "Interceptor failure"
    interceptor: str | None = None
    cause: Exception | None = None
    code: int = 4000
    data: Any | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", (self.message,))
        if self.cause is not None:
            object.__setattr__(self, "__cause__", self.cause)
            object.__setattr__(self, "__suppress_context__", True)

    def __str__(self) -> str:
        if self.interceptor:
            return f"{self.interceptor}: {self.message}"
        return self.message

    def to_error_dict(self) -> dict[str, Any]:
        """Return the canonical ``code``/``message``/``data`` error shape."""
        return {"code": self.code, "message": self.message, "data": self.data}
