from __future__ import annotations

from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    ACCESS_LOG_FILE: str | None = None
    ACCESS_LOG_LOGGER: str = "http_access_log.access"

    LOG_LEVEL: str = "info"

    HOST: str = "0.0.0.0"
    PORT: int = 8000

    model_config = ConfigDict(
        env_file=".env",
        extra="ignore",
    )


settings = Settings()
