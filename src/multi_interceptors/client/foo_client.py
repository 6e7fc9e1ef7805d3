from __future__ import annotations

from multi_interceptors.client.base_client import InterceptingHttpClient

FOO_CLIENT_NAME = "fooClient"
INTERNAL_FOO_PATH = "/api/internal/foo"


class FooClient(InterceptingHttpClient):
    """Client for the internal foo service."""

    async def call_internal_foo(self) -> str:
        response = await self.get(INTERNAL_FOO_PATH)
        return response.text
