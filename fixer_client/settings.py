"""Settings for the fixer_client HTTP service.

The client itself takes everything programmatically; only the FastAPI
wrapper in ``main.py`` reads the environment.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables."""

    APP_NAME: str = "fixer_client"
    LOG_LEVEL: str = "INFO"

    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # Fixer upstream; the key must be provided in env or .env
    FIXER_API_KEY: str = ""
    FIXER_BASE_URL: str = "http://data.fixer.io/api/"
    FIXER_DEFAULT_BASE: Optional[str] = None

    HTTP_TIMEOUT_SEC: float = 8.0

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def endpoint(self) -> str:
        # request paths are appended directly, so the root needs its slash
        url = self.FIXER_BASE_URL.strip()
        return url if url.endswith("/") else f"{url}/"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
