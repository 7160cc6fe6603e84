"""
Configuration helpers for the Wordzee backend.

Routers/services read a frozen Settings object instead of fetching
os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os

DEFAULT_ALLOWED_ORIGINS = "https://angelcastro.es"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    database_url: str
    allowed_origins: tuple[str, ...]
    api_key_secret: str
    api_key_hash: str
    cache_max_age_seconds: int
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _csv(value: str | None) -> tuple[str, ...]:
        return tuple(item.strip().rstrip("/") for item in (value or "").split(",") if item.strip())

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        database_url=os.getenv("DATABASE_URL", "sqlite:///./wordzee.sqlite"),
        allowed_origins=_csv(os.getenv("ALLOWED_ORIGINS", DEFAULT_ALLOWED_ORIGINS)),
        api_key_secret=os.getenv("WORDZEE_API_KEY_SECRET", ""),
        api_key_hash=os.getenv("WORDZEE_API_KEY_HASH", ""),
        cache_max_age_seconds=max(0, _int(os.getenv("CACHE_MAX_AGE_SECONDS", "86400"), 86400)),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
