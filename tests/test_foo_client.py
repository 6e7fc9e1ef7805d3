from __future__ import annotations

import io
import json
import logging
import re

import httpx
import pytest

from multi_interceptors.client import (
    ClientConfig,
    ClientHTTPError,
    FooClient,
    FooClientConfiguration,
    InterceptingHttpClient,
    build_composite_interceptor,
)
from multi_interceptors.exceptions import InterceptorFailure
from multi_interceptors.interceptors import CompositeRequestInterceptor, RequestInterceptor
from multi_interceptors.observability.logging import configure_logging
from multi_interceptors.types import RequestTemplate

BASE_URL = "http://foo.test"


class StubServer:
    """Records requests and answers like a stubbed foo service."""

    def __init__(self, status_code: int = 200, body: str = "OK"):
        self.status_code = status_code
        self.body = body
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, text=self.body)


def _config(server, **overrides) -> ClientConfig:
    values = dict(
        name="fooClient",
        base_url=BASE_URL,
        httpx_client=httpx.AsyncClient(transport=httpx.MockTransport(server)),
    )
    values.update(overrides)
    return ClientConfig(**values)


@pytest.mark.asyncio
async def test_call_internal_foo_sends_all_interceptor_headers():
    server = StubServer()
    configuration = FooClientConfiguration(_config(server))

    async with configuration.create_client() as client:
        body = await client.call_internal_foo()

    assert body == "OK"
    assert len(server.requests) == 1
    sent = server.requests[0]
    assert sent.method == "GET"
    assert sent.url.path == "/api/internal/foo"
    assert sent.headers["X-Auth-Token"] == "mockedTokenValue"
    assert re.fullmatch(r"[0-9a-fA-F\-]{36}", sent.headers["X-Tracking-ID"])
    assert sent.headers["X-Library"] == "libValue"


@pytest.mark.asyncio
async def test_each_call_gets_a_fresh_tracking_id():
    server = StubServer()
    configuration = FooClientConfiguration(_config(server))

    async with configuration.create_client() as client:
        await client.call_internal_foo()
        await client.call_internal_foo()

    first, second = (r.headers["X-Tracking-ID"] for r in server.requests)
    assert first != second


def test_configuration_builds_one_composite_for_all_clients():
    server = StubServer()
    configuration = FooClientConfiguration(_config(server))

    first = configuration.create_client()
    second = configuration.create_client()

    assert isinstance(configuration.interceptor, CompositeRequestInterceptor)
    assert first.interceptor is configuration.interceptor
    assert second.interceptor is configuration.interceptor
    assert isinstance(first, FooClient)
    assert first.name == "fooClient"


@pytest.mark.asyncio
async def test_interceptor_failure_prevents_sending():
    class Failing(RequestInterceptor):
        def apply(self, request: RequestTemplate) -> None:
            raise InterceptorFailure("no token", interceptor="Failing")

    server = StubServer()
    client = FooClient(_config(server), CompositeRequestInterceptor(Failing()))

    with pytest.raises(InterceptorFailure):
        await client.call_internal_foo()

    assert server.requests == []


@pytest.mark.asyncio
async def test_interceptor_overrides_default_and_call_headers():
    server = StubServer()
    client = InterceptingHttpClient(
        _config(server, default_headers={"X-Auth-Token": "from-config", "Accept": "text/plain"}),
        build_composite_interceptor(),
    )

    await client.get("/anything", headers={"X-Library": "from-call"})

    sent = server.requests[0]
    assert sent.headers["Accept"] == "text/plain"
    assert sent.headers["X-Auth-Token"] == "mockedTokenValue"
    assert sent.headers["X-Library"] == "libValue"


@pytest.mark.asyncio
async def test_request_builds_url_and_query():
    server = StubServer()
    client = InterceptingHttpClient(_config(server, base_url=f"{BASE_URL}/"), CompositeRequestInterceptor())

    await client.request("post", "items", params={"page": "2"}, content="payload")

    sent = server.requests[0]
    assert sent.method == "POST"
    assert str(sent.url) == f"{BASE_URL}/items?page=2"
    assert sent.content == b"payload"


@pytest.mark.asyncio
async def test_http_error_status_maps_to_client_error():
    server = StubServer(status_code=503, body="down")
    client = FooClient(_config(server), CompositeRequestInterceptor())

    with pytest.raises(ClientHTTPError) as exc_info:
        await client.call_internal_foo()

    assert exc_info.value.status_code == 503


@pytest.mark.asyncio
async def test_network_error_maps_to_503():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    client = FooClient(_config(handler), CompositeRequestInterceptor())

    with pytest.raises(ClientHTTPError) as exc_info:
        await client.call_internal_foo()

    assert exc_info.value.status_code == 503


@pytest.mark.asyncio
async def test_timeout_maps_to_408():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("slow", request=request)

    client = FooClient(_config(handler), CompositeRequestInterceptor())

    with pytest.raises(ClientHTTPError) as exc_info:
        await client.call_internal_foo()

    assert exc_info.value.status_code == 408


@pytest.mark.asyncio
async def test_aclose_leaves_caller_owned_client_open():
    server = StubServer()
    config = _config(server)
    client = FooClient(config, CompositeRequestInterceptor())

    await client.aclose()

    assert not config.httpx_client.is_closed
    await config.httpx_client.aclose()


@pytest.mark.asyncio
async def test_aclose_closes_owned_client():
    client = FooClient(ClientConfig(name="fooClient", base_url=BASE_URL), CompositeRequestInterceptor())

    await client.aclose()

    assert client.httpx_client.is_closed


def test_base_url_is_required():
    with pytest.raises(ValueError):
        InterceptingHttpClient(ClientConfig(name="fooClient", base_url=""), CompositeRequestInterceptor())


@pytest.mark.asyncio
async def test_client_log_records_carry_tracking_id():
    server = StubServer()
    stream = io.StringIO()
    configure_logging(log_format="json", level=logging.DEBUG, stream=stream)
    client = FooClient(_config(server), build_composite_interceptor())

    await client.call_internal_foo()

    records = [json.loads(line) for line in stream.getvalue().splitlines()]
    tracking_id = server.requests[0].headers["X-Tracking-ID"]
    assert len(records) == 2
    assert {r["request_id"] for r in records} == {tracking_id}
    assert {r["client"] for r in records} == {"fooClient"}
    assert records[0]["url"] == f"{BASE_URL}/api/internal/foo"


@pytest.mark.asyncio
async def test_caller_owned_client_keeps_its_own_timeout():
    server = StubServer()
    config = _config(server, httpx_client=httpx.AsyncClient(transport=httpx.MockTransport(server), timeout=5.0))
    client = FooClient(config, CompositeRequestInterceptor())

    await client.call_internal_foo()

    assert config.timeout == 60.0
    assert server.requests[0].extensions["timeout"]["read"] == 5.0


def test_owned_client_uses_configured_timeout():
    client = FooClient(ClientConfig(name="fooClient", base_url=BASE_URL, timeout=7.0), CompositeRequestInterceptor())

    assert client.httpx_client.timeout.read == 7.0
