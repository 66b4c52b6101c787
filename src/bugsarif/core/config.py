# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Application configuration via environment variables and .env files."""

from typing import Annotated

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="BUGSARIF_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
    )

    # Logging
    log_level: str = "INFO"
    log_format: str = "text"  # "text" or "json"

    # Report
    language: str = ""  # empty means "detect from the process locale"
    json_indent: int = 0  # 0 writes compact JSON

    # Source roots searched for analyzed files, most specific first
    source_roots: Annotated[list[str], NoDecode] = []

    @field_validator("source_roots", mode="before")
    @classmethod
    def _parse_source_roots(cls, v: object) -> list[str]:
        if isinstance(v, str):
            return [r.strip() for r in v.split(",") if r.strip()]
        return v if isinstance(v, list) else []


def get_settings() -> Settings:
    return Settings()
