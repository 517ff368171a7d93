# cloudevent_intake/config.py
from __future__ import annotations

from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="CE_INTAKE_", env_file=".env", extra="ignore")

    # Service metadata
    SERVICE_NAME: str = "cloudevent-intake"
    ENV: str = "local"
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"
    CORS_ALLOW_ORIGINS: List[str] = Field(default_factory=list)

    # Route the event function is mounted on (POST)
    TARGET_PATH: str = "/"

    # Correlation headers; missing request ids are generated
    REQUEST_ID_HEADER: str = "x-request-id"
    CORRELATION_ID_HEADER: str = "x-correlation-id"


settings = Settings()
