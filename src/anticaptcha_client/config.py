# src/anticaptcha_client/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- No secrets required at import time: the API key is checked when a client is built.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

ENV_PREFIX = "ANTICAPTCHA"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_optional(name: str) -> str | None:
    v = os.getenv(name)
    if v is None or v.strip() == "":
        return None
    return v.strip()


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- Credentials / endpoint ----
    api_key: Optional[str]
    base_url: str

    # ---- Polling ----
    poll_interval_seconds: float
    max_attempts: Optional[int]  # None => poll until the task leaves "processing"

    # ---- HTTP transport ----
    request_timeout_seconds: float
    proxy_url: Optional[str]

    # ---- Logging ----
    log_level: str
    log_dir: Optional[Path]

    @staticmethod
    def from_env() -> "Settings":
        api_key = _env_optional(_k("API_KEY"))
        base_url = _env(_k("BASE_URL"), "https://api.anti-captcha.com/").strip() or "https://api.anti-captcha.com/"

        poll_interval_seconds = max(0.0, _env_float(_k("POLL_INTERVAL_SECONDS"), 10.0))
        # 0 (or negative) disables the bound.
        raw_attempts = _env_int(_k("MAX_ATTEMPTS"), 60)
        max_attempts = raw_attempts if raw_attempts > 0 else None

        request_timeout_seconds = _env_float(_k("REQUEST_TIMEOUT_SECONDS"), 60.0)
        if request_timeout_seconds <= 0:
            request_timeout_seconds = 60.0
        proxy_url = _env_optional(_k("PROXY_URL"))

        log_level = _env(_k("LOG_LEVEL"), "INFO").strip().upper() or "INFO"
        raw_log_dir = _env_optional(_k("LOG_DIR"))
        log_dir = Path(raw_log_dir).expanduser() if raw_log_dir else None

        return Settings(
            api_key=api_key,
            base_url=base_url,
            poll_interval_seconds=poll_interval_seconds,
            max_attempts=max_attempts,
            request_timeout_seconds=request_timeout_seconds,
            proxy_url=proxy_url,
            log_level=log_level,
            log_dir=log_dir,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
