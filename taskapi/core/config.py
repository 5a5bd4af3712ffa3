"""
Configuration helpers for the task service.

Routers and services read a Settings object instead of fetching os.environ
directly, so tests can swap values with monkeypatch + cache_clear().
"""

from dataclasses import dataclass
from functools import lru_cache
import os

BACKENDS = ("memory", "json", "sql")


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    tasks_backend: str
    tasks_data_file: str
    database_url: str
    host: str
    port: int
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _choice(value: str | None, choices: tuple[str, ...], default: str) -> str:
        candidate = (value or "").strip().lower()
        return candidate if candidate in choices else default

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        tasks_backend=_choice(os.getenv("TASKS_BACKEND"), BACKENDS, "memory"),
        tasks_data_file=os.getenv("TASKS_DATA_FILE", "tasks.json"),
        database_url=os.getenv("DATABASE_URL", ""),
        host=os.getenv("HOST", "127.0.0.1"),
        port=_int(os.getenv("PORT", "3000"), 3000),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
