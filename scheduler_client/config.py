from __future__ import annotations

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    LOG_LEVEL: str = Field(default="INFO")

    SCHEDULER_API_URL: Optional[str] = Field(default=None)
    SCHEDULER_ACCESS_TOKEN: Optional[str] = Field(default=None)
    SCHEDULER_REQUEST_TIMEOUT: float = Field(default=30.0, gt=0)

    SCHEDULER_HTTP_MAX_ATTEMPTS: int = Field(default=3, ge=1)
    SCHEDULER_HTTP_RETRY_DELAY: float = Field(default=0.5, ge=0)

    SCHEDULER_PAGE_CONCURRENCY: int = Field(default=4, ge=1)
    SCHEDULER_STRICT_PAGINATION: bool = Field(default=False)


settings = Settings()
