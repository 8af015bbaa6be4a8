"""Application settings loaded from environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings

VERSION = "0.3.0"


class Settings(BaseSettings):
    # Region selection
    wow_region: str = "US"  # code or full name, e.g. "EU" or "Europe"
    wow_locale: str = ""  # empty = region default

    # Credentials
    # Leave the secret empty for anonymous requests
    wow_secret_key: str = ""
    wow_public_key: str = ""
    wow_send_empty_apikey: bool = True  # wire compatible "apikey=" when anonymous

    # HTTP
    http_timeout: float = 10.0
    http_connect_timeout: float = 5.0
    user_agent: str = f"bnet-wow/{VERSION}"

    # Logging
    log_level: str = "INFO"
    request_log_file: str = ""  # Empty = stdout only

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
