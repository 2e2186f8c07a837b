"""Runtime configuration sourced from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Tuple


_DEFAULT_CORS_ORIGINS = (
    "http://localhost",
    "http://localhost:3000",
    "http://localhost:5173",
)


@dataclass(frozen=True)
class Settings:
    log_level: str
    app_env: str
    host: str
    port: int
    db_sync: bool
    cors_origins: Tuple[str, ...]
    google_client_id: Optional[str]
    google_client_secret: Optional[str]
    google_redirect_uri: Optional[str]

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"

    @property
    def google_oauth_configured(self) -> bool:
        return bool(self.google_client_id and self.google_client_secret and self.google_redirect_uri)


def _normalize_bool(value: str | None, default: bool = False) -> bool:
    """Return normalized boolean from environment-style value."""
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"", "0", "false", "no", "off"}:
        return False
    if normalized in {"1", "true", "yes", "on"}:
        return True
    return default


def _normalize_list(value: str | None, default: Tuple[str, ...]) -> Tuple[str, ...]:
    if not value:
        return default
    items = []
    for entry in value.split(","):
        cleaned = entry.strip().strip('"').strip("'")
        if cleaned:
            items.append(cleaned)
    return tuple(items) or default


def _normalize_int(value: str | None, default: int) -> int:
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _optional(name: str) -> Optional[str]:
    value = os.getenv(name)
    if value is None:
        return None
    value = value.strip()
    return value or None


@lru_cache(maxsize=None)
def get_settings() -> Settings:
    """Return the cached settings built from the current environment."""
    return Settings(
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        app_env=os.getenv("APP_ENV", "development").strip().lower(),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_normalize_int(os.getenv("PORT"), 3000),
        db_sync=_normalize_bool(os.getenv("DB_SYNC")),
        cors_origins=_normalize_list(os.getenv("CORS_ORIGINS"), _DEFAULT_CORS_ORIGINS),
        google_client_id=_optional("GOOGLE_CLIENT_ID"),
        google_client_secret=_optional("GOOGLE_CLIENT_SECRET"),
        google_redirect_uri=_optional("GOOGLE_REDIRECT_URI"),
    )


def refresh_settings_cache() -> None:
    """Invalidate cached settings (useful for tests)."""
    get_settings.cache_clear()
