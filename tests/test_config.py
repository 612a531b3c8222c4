# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from anticaptcha_client.config import Settings

_VARS = (
    "API_KEY",
    "BASE_URL",
    "POLL_INTERVAL_SECONDS",
    "MAX_ATTEMPTS",
    "REQUEST_TIMEOUT_SECONDS",
    "PROXY_URL",
    "LOG_LEVEL",
    "LOG_DIR",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for suffix in _VARS:
        monkeypatch.delenv(f"ANTICAPTCHA_{suffix}", raising=False)


def test_defaults() -> None:
    s = Settings.from_env()

    assert s.api_key is None
    assert s.base_url == "https://api.anti-captcha.com/"
    assert s.poll_interval_seconds == 10.0
    assert s.max_attempts == 60
    assert s.request_timeout_seconds == 60.0
    assert s.proxy_url is None
    assert s.log_level == "INFO"
    assert s.log_dir is None


def test_values_from_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("ANTICAPTCHA_API_KEY", "  secret  ")
    monkeypatch.setenv("ANTICAPTCHA_POLL_INTERVAL_SECONDS", "2.5")
    monkeypatch.setenv("ANTICAPTCHA_MAX_ATTEMPTS", "7")
    monkeypatch.setenv("ANTICAPTCHA_PROXY_URL", "http://localhost:8888")
    monkeypatch.setenv("ANTICAPTCHA_LOG_LEVEL", "debug")
    monkeypatch.setenv("ANTICAPTCHA_LOG_DIR", str(tmp_path))

    s = Settings.from_env()

    assert s.api_key == "secret"
    assert s.poll_interval_seconds == 2.5
    assert s.max_attempts == 7
    assert s.proxy_url == "http://localhost:8888"
    assert s.log_level == "DEBUG"
    assert s.log_dir == tmp_path


def test_zero_max_attempts_means_unbounded(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ANTICAPTCHA_MAX_ATTEMPTS", "0")
    assert Settings.from_env().max_attempts is None


def test_malformed_numbers_fall_back_to_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ANTICAPTCHA_POLL_INTERVAL_SECONDS", "soon")
    monkeypatch.setenv("ANTICAPTCHA_MAX_ATTEMPTS", "many")
    monkeypatch.setenv("ANTICAPTCHA_REQUEST_TIMEOUT_SECONDS", "-1")

    s = Settings.from_env()

    assert s.poll_interval_seconds == 10.0
    assert s.max_attempts == 60
    assert s.request_timeout_seconds == 60.0
