from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_DATA_DIR = Path(__file__).resolve().parent / "data" / "years"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_ignore_empty=True, extra="ignore")

    HOLIDAY_DATA_DIR: Path = DEFAULT_DATA_DIR

    SERVICE_NAME: str = "German School Holidays API"
    APP_VERSION: str = "2.0.0"

    CORS_ORIGINS: str = "*"

    LOG_LEVEL: str = "INFO"

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


settings = Settings()
