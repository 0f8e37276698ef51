from pytest_httpx import HTTPXMock

from steprest.services.http import HttpClient, HttpContext, HttpMethod
from steprest.services.wait import Wait


def test_http_context_fixture_is_empty(http_context: HttpContext, http_client: HttpClient):
    assert http_context.client is http_client
    assert http_context.uri is None
    assert http_context.status == 0


def test_http_context_fixture_sends(httpx_mock: HTTPXMock, http_context: HttpContext):
    httpx_mock.add_response(url="https://api.example.com/ping", text="pong")
    http_context.uri = "https://api.example.com/ping"
    http_context.method = HttpMethod.parse("get")

    http_context.send()

    assert http_context.result() == "pong"


def test_wait_fixture(wait: Wait):
    assert wait.max_retries == 10
    assert wait.interval == 1.0
