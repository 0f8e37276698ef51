"""pytest fixtures giving each scenario its own HTTP context.

Enable in a ``conftest.py`` with::

    pytest_plugins = ["steprest.pytest_plugin"]
"""

import pytest

from steprest.config import Settings, get_settings
from steprest.services.http import HttpClient, HttpContext
from steprest.services.wait import Wait


@pytest.fixture(scope="session")
def steprest_settings() -> Settings:
    return get_settings()


@pytest.fixture(scope="session")
def http_client(steprest_settings: Settings):
    """Shared client, closed at the end of the session."""
    with HttpClient.from_settings(steprest_settings) as client:
        yield client


@pytest.fixture
def http_context(http_client: HttpClient, steprest_settings: Settings):
    """Fresh context per scenario; reset on teardown."""
    context = HttpContext(client=http_client, settings=steprest_settings)
    yield context
    context.reset()


@pytest.fixture
def wait(steprest_settings: Settings) -> Wait:
    return Wait.from_settings(steprest_settings)
