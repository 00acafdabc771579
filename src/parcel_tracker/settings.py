from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from .db import get_db_path


def _env_flag(name: str) -> bool:
    # Unset or empty means off; anything unrecognised is a config mistake.
    value = (os.getenv(name) or "").strip().lower()
    if value in {"", "0", "false", "no", "off"}:
        return False
    if value in {"1", "true", "yes", "on"}:
        return True
    raise ValueError(f"{name} must be a boolean, got {value!r}")


@dataclass(frozen=True)
class Settings:
    db_path: str
    log_level: str
    log_json: bool

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            db_path=get_db_path(),
            log_level=(os.getenv("TRACKER_LOG_LEVEL") or "WARNING").strip().upper(),
            log_json=_env_flag("TRACKER_LOG_JSON"),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()


def reset_settings_cache() -> None:
    """Drop the cached Settings so the next get_settings() reads the env again."""

    get_settings.cache_clear()
