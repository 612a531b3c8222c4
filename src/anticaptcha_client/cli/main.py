# src/anticaptcha_client/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds the client from settings (+ option overrides),
solves one task and prints the solution to stdout.

Exit codes: 0 solved, 1 task failed (TaskError), 2 configuration / usage error.
"""

from __future__ import annotations

import asyncio
import dataclasses
import logging
from pathlib import Path

import click

from ..cli.bootstrap import create_client
from ..config import Settings, get_settings
from ..core.errors import ConfigError, TaskError
from ..logging_setup import setup_logging
from ..tasks.task_models import ImageTask, RecaptchaTask, TaskRequest
from ..transport.http import DEBUG_PROXY_URL

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_TASK_FAILED = 1
EXIT_CONFIG = 2


def _apply_overrides(
    settings: Settings,
    *,
    api_key: str | None,
    poll_interval: float | None,
    max_attempts: int | None,
    debug_proxy: bool,
    log_level: str | None,
) -> Settings:
    changes: dict[str, object] = {}
    if api_key:
        changes["api_key"] = api_key
    if poll_interval is not None:
        changes["poll_interval_seconds"] = poll_interval
    if max_attempts is not None:
        changes["max_attempts"] = max_attempts if max_attempts > 0 else None
    if debug_proxy:
        changes["proxy_url"] = DEBUG_PROXY_URL
    if log_level:
        changes["log_level"] = log_level.upper()
    return dataclasses.replace(settings, **changes) if changes else settings


async def _solve(settings: Settings, request: TaskRequest) -> str:
    async with create_client(settings=settings) as client:
        return await client.solve(request)


def _run(ctx: click.Context, request: TaskRequest) -> None:
    settings: Settings = ctx.obj
    try:
        solution = asyncio.run(_solve(settings, request))
    except ConfigError as e:
        click.echo(str(e), err=True)
        ctx.exit(EXIT_CONFIG)
    except TaskError as e:
        logger.debug("Task failed kind=%s", e.kind.value)
        click.echo(f"{e.kind.value}: {e}", err=True)
        ctx.exit(EXIT_TASK_FAILED)
    else:
        click.echo(solution)


@click.group()
@click.option("--api-key", default=None, help="Client key (default: ANTICAPTCHA_API_KEY).")
@click.option(
    "--poll-interval",
    type=click.FloatRange(min=0.0),
    default=None,
    help="Seconds between status queries.",
)
@click.option(
    "--max-attempts",
    type=click.IntRange(min=0),
    default=None,
    help="Maximum status queries before giving up (0 = no limit).",
)
@click.option("--debug-proxy", is_flag=True, help=f"Route requests through {DEBUG_PROXY_URL}.")
@click.option("--log-level", default=None, help="Console log level (default: ANTICAPTCHA_LOG_LEVEL).")
@click.pass_context
def anticaptcha(
    ctx: click.Context,
    api_key: str | None,
    poll_interval: float | None,
    max_attempts: int | None,
    debug_proxy: bool,
    log_level: str | None,
) -> None:
    """Submit a task to Anti-Captcha and wait for the solution."""
    settings = _apply_overrides(
        get_settings(),
        api_key=api_key,
        poll_interval=poll_interval,
        max_attempts=max_attempts,
        debug_proxy=debug_proxy,
        log_level=log_level,
    )

    console_level = getattr(logging, settings.log_level, logging.INFO)
    setup_logging(log_dir=settings.log_dir, console_level=console_level)

    ctx.obj = settings


@anticaptcha.command("recaptcha")
@click.option("--url", "website_url", required=True, help="Page URL the widget is on.")
@click.option("--site-key", "website_key", required=True, help="data-sitekey of the widget.")
@click.pass_context
def recaptcha(ctx: click.Context, website_url: str, website_key: str) -> None:
    """Solve a reCAPTCHA v2 (proxyless)."""
    _run(ctx, RecaptchaTask(website_url=website_url, website_key=website_key))


@anticaptcha.command("image")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def image(ctx: click.Context, path: Path) -> None:
    """Recognize the text in an image file."""
    try:
        request = ImageTask.from_path(path)
    except OSError as e:
        click.echo(f"Cannot read image: {e}", err=True)
        ctx.exit(EXIT_CONFIG)
    _run(ctx, request)


if __name__ == "__main__":  # pragma: no cover
    anticaptcha()
