from __future__ import annotations

import logging
from typing import Any

import httpx

from multi_interceptors.client.config import ClientConfig
from multi_interceptors.client.errors import ClientHTTPError
from multi_interceptors.interceptors.base import RequestInterceptor
from multi_interceptors.interceptors.builtin import TRACKING_ID_HEADER
from multi_interceptors.observability.logging import request_log_context
from multi_interceptors.types import RequestTemplate

logger = logging.getLogger(__name__)


class InterceptingHttpClient:
    """Async HTTP client that runs one request interceptor before every send.

    The interceptor is the only hook: it receives the fully built
    :class:`RequestTemplate` immediately before transmission. Anything it
    raises propagates to the caller and nothing is sent.
    """

    def __init__(self, config: ClientConfig, interceptor: RequestInterceptor):
        if not config.base_url:
            raise ValueError("Must provide base_url")
        self.config = config
        self.base_url = config.base_url.rstrip("/")
        self.interceptor = interceptor
        self._owns_client = config.httpx_client is None
        self.httpx_client = config.httpx_client or httpx.AsyncClient(timeout=config.timeout)

    @property
    def name(self) -> str:
        return self.config.name

    def build_template(
        self,
        method: str,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        params: dict[str, str] | None = None,
        content: bytes | str | None = None,
    ) -> RequestTemplate:
        if not path.startswith("/"):
            path = f"/{path}"
        template = RequestTemplate(
            method=method.upper(),
            url=f"{self.base_url}{path}",
            headers=dict(self.config.default_headers),
            params=dict(params or {}),
            content=content,
        )
        for name, value in (headers or {}).items():
            template.header(name, value)
        return template

    async def request(
        self,
        method: str,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        params: dict[str, str] | None = None,
        content: bytes | str | None = None,
    ) -> httpx.Response:
        template = self.build_template(
            method, path, headers=headers, params=params, content=content
        )
        self.interceptor.apply(template)
        with request_log_context(self.name, template.header_value(TRACKING_ID_HEADER)):
            return await self._send(template)

    async def get(self, path: str, **kwargs: Any) -> httpx.Response:
        return await self.request("GET", path, **kwargs)

    async def _send(self, template: RequestTemplate) -> httpx.Response:
        # Timeout comes from the httpx client; an owned one is built with config.timeout.
        request = self.httpx_client.build_request(**template.to_httpx_kwargs())
        call = {"method": request.method, "url": str(request.url)}
        logger.debug("Sending %s %s", request.method, request.url, extra=call)
        try:
            response = await self.httpx_client.send(request)
            response.raise_for_status()
        except httpx.TimeoutException as e:
            raise ClientHTTPError(408, "Client request timed out") from e
        except httpx.HTTPStatusError as e:
            raise ClientHTTPError(e.response.status_code, str(e)) from e
        except httpx.RequestError as e:
            raise ClientHTTPError(503, f"Network communication error: {e}") from e
        logger.debug(
            "Received %s for %s %s",
            response.status_code,
            request.method,
            request.url,
            extra={**call, "status_code": response.status_code},
        )
        return response

    async def aclose(self) -> None:
        if self._owns_client:
            await self.httpx_client.aclose()

    async def __aenter__(self) -> InterceptingHttpClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
