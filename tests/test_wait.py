import pytest
from pytest_httpx import HTTPXMock

from steprest.config import Settings
from steprest.exceptions import WaitTimeoutError
from steprest.services.http import HttpContext, HttpMethod
from steprest.services.wait import Wait, Waitable


class Counter:
    def __init__(self):
        self.value = 0

    def retry(self):
        self.value += 1

    def result(self):
        return self.value


def test_counter_is_waitable():
    assert isinstance(Counter(), Waitable)


def test_context_is_waitable(context: HttpContext):
    assert isinstance(context, Waitable)


def test_returns_immediately_when_condition_holds():
    sleeps = []
    counter = Counter()

    result = Wait(interval=1.0, max_retries=3, sleep=sleeps.append).until(counter, lambda v: v == 0)

    assert result == 0
    assert sleeps == []


def test_retries_until_condition_holds():
    sleeps = []
    counter = Counter()

    result = Wait(interval=0.5, max_retries=5, sleep=sleeps.append).until(counter, lambda v: v >= 3)

    assert result == 3
    assert sleeps == [0.5, 0.5, 0.5]


def test_raises_after_max_retries():
    counter = Counter()
    wait = Wait(interval=0, max_retries=2, sleep=lambda _: None)

    with pytest.raises(WaitTimeoutError) as exc_info:
        wait.until(counter, lambda v: v > 10)

    assert exc_info.value.attempts == 2
    assert exc_info.value.last_result == 2
    assert counter.value == 2


def test_from_settings():
    wait = Wait.from_settings(Settings(_env_file=None, wait_interval_ms=250, wait_max_retries=4))

    assert wait.interval == 0.25
    assert wait.max_retries == 4


def test_polls_http_context_until_body_matches(
    httpx_mock: HTTPXMock, context: HttpContext, base_url: str
):
    httpx_mock.add_response(url=f"{base_url}/jobs/1", json={"state": "pending"})
    httpx_mock.add_response(url=f"{base_url}/jobs/1", json={"state": "pending"})
    httpx_mock.add_response(url=f"{base_url}/jobs/1", json={"state": "done"})
    context.uri = f"{base_url}/jobs/1"
    context.method = HttpMethod.GET
    context.send()

    result = Wait(interval=0, max_retries=5, sleep=lambda _: None).until(
        context, lambda body: '"done"' in body
    )

    assert '"done"' in result
    assert len(httpx_mock.get_requests()) == 3
