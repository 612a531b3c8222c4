# src/anticaptcha_client/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- takes settings (loaded once, possibly overridden by CLI flags),
- builds the concrete HTTP transport,
- wires it into an AntiCaptchaClient that owns (and closes) that transport.
"""

from __future__ import annotations

import logging

from ..client import AntiCaptchaClient
from ..config import Settings, get_settings
from ..core.errors import ConfigError
from ..transport.http import HttpxTransport

logger = logging.getLogger(__name__)


def create_client(*, settings: Settings | None = None) -> AntiCaptchaClient:
    """
    Create a client from the provided settings.

    Keeping settings injectable makes the CLI easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    if not settings.api_key or not settings.api_key.strip():
        raise ConfigError("Anti-Captcha API key is not set. Set ANTICAPTCHA_API_KEY in your .env or pass --api-key.")

    transport = HttpxTransport(
        request_timeout=settings.request_timeout_seconds,
        proxy_url=settings.proxy_url,
    )

    logger.debug(
        "Client: base_url=%s poll_interval=%.1fs max_attempts=%s",
        settings.base_url,
        settings.poll_interval_seconds,
        settings.max_attempts if settings.max_attempts is not None else "unbounded",
    )

    return AntiCaptchaClient(
        transport,
        api_key=settings.api_key.strip(),
        base_url=settings.base_url,
        poll_interval=settings.poll_interval_seconds,
        max_attempts=settings.max_attempts,
        owns_transport=True,
    )
