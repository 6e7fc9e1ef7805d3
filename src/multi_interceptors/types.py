"""Request types shared by interceptors and the HTTP client."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class RequestTemplate(BaseModel):
    """Mutable outgoing HTTP request, prior to transmission.

    Interceptors only touch ``headers`` through :meth:`header`. Header names
    are kept exactly as given; no case folding or validation is applied.
    """

    method: str = "GET"
    url: str = ""
    headers: dict[str, str] = Field(default_factory=dict)
    params: dict[str, str] = Field(default_factory=dict)
    content: bytes | str | None = None

    def header(self, name: str, value: str) -> RequestTemplate:
        """Set ``name`` to ``value``, replacing any previous value."""
        self.headers[name] = value
        return self

    def header_value(self, name: str) -> str | None:
        return self.headers.get(name)

    def to_httpx_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for ``httpx.AsyncClient.build_request``."""
        kwargs: dict[str, Any] = {
            "method": self.method,
            "url": self.url,
            "headers": dict(self.headers),
        }
        if self.params:
            kwargs["params"] = dict(self.params)
        if self.content is not None:
            kwargs["content"] = self.content
        return kwargs
