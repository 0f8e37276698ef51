import pytest

from steprest.config import Settings
from steprest.services.http import HttpClient, HttpContext

pytest_plugins = ["steprest.pytest_plugin"]

BASE_URL = "https://api.example.com"


@pytest.fixture(scope="session")
def steprest_settings() -> Settings:
    """Settings isolated from any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def client(steprest_settings: Settings):
    with HttpClient.from_settings(steprest_settings) as http_client:
        yield http_client


@pytest.fixture
def context(client: HttpClient, steprest_settings: Settings) -> HttpContext:
    return HttpContext(client=client, settings=steprest_settings)


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture
def upload_file(tmp_path):
    """Create a temporary file for attachment tests."""
    file_path = tmp_path / "report.txt"
    file_path.write_text("report content")
    return file_path
