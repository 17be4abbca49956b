from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_HOST = "https://api.opentok.com"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(Path.cwd() / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    tokbox_key: str = ""
    tokbox_secret: str = ""
    tokbox_api_host: str = DEFAULT_API_HOST
    tokbox_timeout: float = 10.0

    @field_validator("tokbox_api_host", mode="before")
    @classmethod
    def strip_host(cls, value: str) -> str:
        if isinstance(value, str):
            value = value.strip().rstrip("/")
            return value or DEFAULT_API_HOST
        return value


@lru_cache
def get_settings() -> Settings:
    return Settings()
