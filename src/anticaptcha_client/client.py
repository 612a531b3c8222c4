# src/anticaptcha_client/client.py

from __future__ import annotations

import asyncio
import logging

from .core.ports import Sleeper, Transport
from .tasks.resolver import DEFAULT_MAX_ATTEMPTS, DEFAULT_POLL_INTERVAL, TaskResolver
from .tasks.submitter import TaskSubmitter
from .tasks.task_models import ImageTask, RecaptchaTask, TaskRequest

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.anti-captcha.com/"


class AntiCaptchaClient:
    """
    Submit a task, then poll until it is solved.

    One call follows one task to completion or failure; every failure is a TaskError.
    Concurrent calls on the same client are independent (nothing is shared but the transport).
    """

    def __init__(
        self,
        transport: Transport,
        *,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        max_attempts: int | None = DEFAULT_MAX_ATTEMPTS,
        sleeper: Sleeper = asyncio.sleep,
        owns_transport: bool = False,
    ) -> None:
        self.transport = transport
        self.submitter = TaskSubmitter(transport, api_key=api_key, base_url=base_url)
        self.resolver = TaskResolver(
            transport,
            api_key=api_key,
            base_url=base_url,
            poll_interval=poll_interval,
            max_attempts=max_attempts,
            sleeper=sleeper,
        )
        self._owns_transport = owns_transport

    async def solve(
        self,
        request: TaskRequest,
        *,
        cancel_event: asyncio.Event | None = None,
    ) -> str:
        handle = await self.submitter.submit(request)
        result = await self.resolver.resolve(
            handle,
            request.extract_solution,
            cancel_event=cancel_event,
        )
        logger.info("Task %s solved (%s)", handle, request.TASK_TYPE)
        return result

    async def solve_recaptcha(
        self,
        website_url: str,
        website_key: str,
        *,
        cancel_event: asyncio.Event | None = None,
    ) -> str:
        """Return the g-recaptcha-response token for the given page and site key."""
        return await self.solve(RecaptchaTask(website_url, website_key), cancel_event=cancel_event)

    async def solve_image(
        self,
        image: str | bytes,
        *,
        cancel_event: asyncio.Event | None = None,
    ) -> str:
        """Return the recognized text; `image` is base64 text or raw image bytes."""
        task = ImageTask.from_bytes(image) if isinstance(image, bytes) else ImageTask(image)
        return await self.solve(task, cancel_event=cancel_event)

    async def aclose(self) -> None:
        if self._owns_transport:
            close = getattr(self.transport, "aclose", None)
            if close is not None:
                await close()

    async def __aenter__(self) -> AntiCaptchaClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
