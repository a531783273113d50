"""Runtime configuration, read from ``OCPP_VALIDATE_*`` environment variables."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="OCPP_VALIDATE_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    log_level: str = Field(default="INFO", description="Root logging level.")
    api_host: str = Field(default="0.0.0.0", min_length=1)
    api_port: int = Field(default=8080, ge=1, le=65535)
    api_key: Optional[str] = Field(
        default=None,
        description="Required x-api-key header value; unset disables the check.",
    )
    preload_schemas: bool = Field(
        default=True,
        description="Compile every catalog schema when the API starts.",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


def configure_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(
        level=(level or get_settings().log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
