from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from docindex.models.configs import ContentConfig
from docindex.orchestration.config_loader import load_content_config

load_dotenv(override=False)


DEFAULT_CORS_ORIGINS = ["http://localhost:5173", "http://localhost:5174"]


def _parse_origins(value: object) -> List[str]:
    if value is None:
        return list(DEFAULT_CORS_ORIGINS)
    if isinstance(value, str):
        if not value.strip():
            return list(DEFAULT_CORS_ORIGINS)
        return [origin.strip() for origin in value.split(",") if origin.strip()]
    return list(value)


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() not in {"0", "false", "no"}


class Settings(BaseModel):
    """Runtime configuration for the content server."""

    environment: str = Field(default_factory=lambda: os.getenv("ENVIRONMENT", "dev"))
    content_dir: Path = Field(default_factory=lambda: Path(os.getenv("CONTENT_DIR", "content")))
    content_base: str | None = Field(default_factory=lambda: os.getenv("CONTENT_BASE") or None)
    content_config: Path | None = Field(
        default_factory=lambda: Path(os.environ["CONTENT_CONFIG"]) if os.getenv("CONTENT_CONFIG") else None
    )
    content_pattern: str = Field(default_factory=lambda: os.getenv("CONTENT_PATTERN", "**/*.md"))
    read_concurrency: int = Field(default_factory=lambda: int(os.getenv("READ_CONCURRENCY", "16")), gt=0)
    rebuild_on_request: bool = Field(
        default_factory=lambda: _env_flag("REBUILD_ON_REQUEST", "true" if os.getenv("ENVIRONMENT", "dev") == "dev" else "false")
    )
    cors_origins: List[str] = Field(default_factory=lambda: _parse_origins(os.getenv("CORS_ORIGINS")))

    model_config = {
        "frozen": True,
    }

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: object) -> List[str]:
        return _parse_origins(value)

    def content(self) -> ContentConfig:
        """Content settings, taken from ``content_config`` when one is set."""

        if self.content_config is not None:
            return load_content_config(self.content_config)
        return ContentConfig(
            content_dir=self.content_dir,
            base=self.content_base,
            pattern=self.content_pattern,
            concurrency=self.read_concurrency,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance for FastAPI dependency injection."""

    return Settings()


__all__ = ["Settings", "get_settings", "DEFAULT_CORS_ORIGINS"]
