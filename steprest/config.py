from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator
from functools import lru_cache


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env")

    # HTTP client settings
    http_ssl_verify: bool = False
    http_timeout: float = 30.0  # seconds
    http_follow_redirects: bool = True
    http_headers: dict[str, str] = {}  # global default request headers

    # Attachments: relative paths resolve against this directory when set
    files_base_dir: str = ""

    # Wait/poll settings
    wait_interval_ms: int = 1000
    wait_max_retries: int = 10

    @field_validator("wait_interval_ms", "wait_max_retries")
    @classmethod
    def non_negative(cls, value: int) -> int:
        if value < 0:
            raise ValueError("must be >= 0")
        return value


@lru_cache
def get_settings() -> Settings:
    return Settings()
