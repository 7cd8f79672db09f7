from __future__ import annotations

import logging
import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Centralised runtime configuration for the daylog merge engine."""

    model_config = SettingsConfigDict(
        env_prefix="DAYLOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="info")

    default_fps: int = Field(
        default=24,
        gt=0,
        description="Frame rate used for clip durations when a clip carries no fps.",
    )
    assembly_workers: int = Field(
        default=1,
        ge=1,
        description="Threads used to assemble day logs (1 assembles sequentially).",
    )
    cache_enabled: bool = Field(
        default=True,
        description="Disable to make every selection recompute regardless of cache key.",
    )

    @property
    def level(self) -> int:
        value = logging.getLevelName(self.log_level.upper())
        if isinstance(value, int):
            return value
        return logging.INFO


@lru_cache()
def get_settings() -> Settings:
    load_dotenv(".env", override=False)

    _ENV_ALIAS_MAP = {
        "DAYLOG_FPS": "DAYLOG_DEFAULT_FPS",
        "DAYLOG_WORKERS": "DAYLOG_ASSEMBLY_WORKERS",
    }

    for source, target in _ENV_ALIAS_MAP.items():
        value = os.getenv(source)
        if value:
            os.environ[target] = value

    return Settings()


__all__ = ["Settings", "get_settings"]
