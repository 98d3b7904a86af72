"""Application settings loaded from environment variables and ``.env``."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv


def _env(key: str, default: str = "") -> str:
    return os.environ.get(key, default)


@dataclass(frozen=True)
class AppConfig:
    env: str = field(default_factory=lambda: _env("APP_ENV", "development"))
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))
    log_file: str = field(default_factory=lambda: _env("LOG_FILE"))

    @property
    def is_development(self) -> bool:
        return self.env == "development"


@dataclass(frozen=True)
class StorageConfig:
    world_path: str = field(default_factory=lambda: _env("WORLD_PATH", "data/world"))

    @property
    def root(self) -> Path:
        return Path(self.world_path).expanduser()


@dataclass(frozen=True)
class ServerConfig:
    host: str = field(default_factory=lambda: _env("HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: int(_env("PORT", "8000")))


@dataclass(frozen=True)
class Settings:
    app: AppConfig = field(default_factory=AppConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)
    server: ServerConfig = field(default_factory=ServerConfig)


def load_settings() -> Settings:
    """Load ``.env`` (without overriding the environment) and build settings."""
    load_dotenv()
    return Settings()
