"""Settings loaded from environment variables (+ optional .env).

Module-level constants are kept for the GUI modules that import them directly.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "ICBUTLER"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True)
class Settings:
    # ---- remote store ----
    base_url: str
    token: str | None
    timeout: float
    offline: bool

    # ---- window ----
    window_geometry: str
    topmost: bool

    # ---- logging ----
    log_level: str
    data_dir: Path

    @staticmethod
    def from_env() -> "Settings":
        token = _env(_k("TOKEN")).strip() or None
        return Settings(
            base_url=_env(_k("BASE_URL"), "http://127.0.0.1:8000").rstrip("/"),
            token=token,
            timeout=_env_float(_k("TIMEOUT"), 10.0),
            offline=_env_bool(_k("OFFLINE"), False),
            window_geometry=_env(_k("WINDOW_GEOMETRY"), "640x520"),
            topmost=_env_bool(_k("TOPMOST"), False),
            log_level=_env(_k("LOG_LEVEL"), "INFO").upper(),
            data_dir=_env_path(_k("DATA_DIR"), Path(".local/icbutler")),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()


_s = get_settings()

WINDOW_GEOMETRY = _s.window_geometry
TOPMOST = _s.topmost
