"""Software-only simulation / demo - no real systems will be contacted or modified."""
from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DEMO_ADDRESSES = [
    "192.168.1.1:8080",
    "192.168.1.1",
    "[::1]:8080",
    "::1",
    "example.com:8080",
    "example.com",
    "[2001:db8::1]:3000",
    "2001:db8::1",
]


class Settings(BaseSettings):
    app_name: str = "portstrip"
    log_level: str = "INFO"
    log_json: bool = True
    demo_addresses: List[str] = Field(default_factory=lambda: list(DEFAULT_DEMO_ADDRESSES))

    model_config = SettingsConfigDict(
        env_prefix="PORTSTRIP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
