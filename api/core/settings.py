"""
Runtime settings read from the environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


def _env_str(name: str, default: str) -> str:
    return os.environ.get(name, default).strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    return raw in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    database_url: str = ""
    db_pool_min: int = 1
    db_pool_max: int = 5
    db_command_timeout: int = 30
    db_init_schema: bool = False
    token_ttl_minutes: int = 24 * 60
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8080

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            database_url=os.environ.get("DATABASE_URL", "").strip(),
            db_pool_min=_env_int("DB_POOL_MIN", 1),
            db_pool_max=_env_int("DB_POOL_MAX", 5),
            db_command_timeout=_env_int("DB_COMMAND_TIMEOUT", 30),
            db_init_schema=_env_bool("DB_INIT_SCHEMA", False),
            token_ttl_minutes=_env_int("TOKEN_TTL_MINUTES", 24 * 60),
            log_level=_env_str("LOG_LEVEL", "INFO").upper(),
            host=_env_str("HOST", "0.0.0.0"),
            port=_env_int("PORT", 8080),
        )

    def require_database_url(self) -> str:
        if not self.database_url:
            raise RuntimeError("DATABASE_URL is not set.")
        return self.database_url
