# app/config.py
"""
Environment-based settings for the catalog API.

Values come from BOOKCATALOG_* environment variables or a local .env file.
"""

from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    database_url: str = Field(default="sqlite:///db.sqlite")
    # Browser origins allowed to call the API (JSON list in the env var)
    cors_origins: List[str] = Field(default_factory=lambda: ["http://localhost:5500"])
    log_level: str = Field(default="INFO")

    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8082)

    data_file: str = Field(default="data/books.csv")

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.strip().upper()

    model_config = SettingsConfigDict(
        env_prefix="BOOKCATALOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
