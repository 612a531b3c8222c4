# src/anticaptcha_client/tasks/resolver.py

from __future__ import annotations

"""
Task resolver.

A small polling loop that:
- queries getTaskResult once, immediately,
- while the status is "processing": sleeps a fixed interval and queries again,
- on any other status: extracts the solution with the caller's extractor.

The interval, the attempt bound and the sleeper are constructor values, so
independent resolutions share nothing and tests can inject a fake clock.
To stop a running resolution, set cancel_event or cancel the coroutine/task.
"""

import asyncio
import logging
from collections.abc import Callable
from typing import Any

from ..core.errors import (
    MalformedResponseError,
    NoSolutionError,
    TaskCancelledError,
    TaskError,
    TaskTimeoutError,
)
from ..core.ports import JsonObject, Sleeper, Transport
from .submitter import endpoint
from .task_models import TaskHandle, TaskStatus

logger = logging.getLogger(__name__)

SolutionExtractor = Callable[[Any], str]

DEFAULT_POLL_INTERVAL = 10.0
DEFAULT_MAX_ATTEMPTS = 60


def _no_solution_detail(response: JsonObject) -> str | None:
    # Unsolvable tasks come back without status/solution but with an error code.
    parts = [str(response[k]) for k in ("errorCode", "errorDescription") if response.get(k)]
    return ": ".join(parts) or None


class TaskResolver:
    def __init__(
        self,
        transport: Transport,
        *,
        api_key: str,
        base_url: str,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        max_attempts: int | None = DEFAULT_MAX_ATTEMPTS,
        sleeper: Sleeper = asyncio.sleep,
    ) -> None:
        if max_attempts is not None and max_attempts < 1:
            raise ValueError("max_attempts must be >= 1 (or None for no bound)")
        self._transport = transport
        self._api_key = api_key
        self._url = endpoint(base_url, "getTaskResult")
        self.poll_interval = max(0.0, float(poll_interval))
        self.max_attempts = max_attempts
        self._sleep = sleeper

    async def query(self, handle: TaskHandle) -> JsonObject:
        """One getTaskResult exchange."""
        body = {
            "clientKey": self._api_key,
            "taskId": handle.task_id,
        }
        response = await self._transport.post(self._url, body)
        if not isinstance(response, dict):
            raise MalformedResponseError(
                f"getTaskResult returned {type(response).__name__}, expected object"
            )
        return response

    async def _pause(self, cancel_event: asyncio.Event | None) -> None:
        if cancel_event is None:
            await self._sleep(self.poll_interval)
            return

        if cancel_event.is_set():
            raise TaskCancelledError()
        await self._sleep(self.poll_interval)
        if cancel_event.is_set():
            raise TaskCancelledError()

    async def wait_until_done(
        self,
        handle: TaskHandle,
        *,
        cancel_event: asyncio.Event | None = None,
    ) -> JsonObject:
        """Poll until the status leaves "processing"; return that terminal response."""
        attempts = 1
        response = await self.query(handle)

        while TaskStatus.from_response(response.get("status")) is TaskStatus.PROCESSING:
            if self.max_attempts is not None and attempts >= self.max_attempts:
                raise TaskTimeoutError(f"task_id={handle} after {attempts} status queries")

            logger.debug(
                "Task %s not ready, checking again in %.1fs (attempt %d)",
                handle,
                self.poll_interval,
                attempts,
            )
            await self._pause(cancel_event)
            attempts += 1
            response = await self.query(handle)

        logger.debug("Task %s finished after %d status queries", handle, attempts)
        return response

    async def resolve(
        self,
        handle: TaskHandle,
        extract: SolutionExtractor,
        *,
        cancel_event: asyncio.Event | None = None,
    ) -> str:
        response = await self.wait_until_done(handle, cancel_event=cancel_event)

        solution = response.get("solution")
        if solution is None:
            raise NoSolutionError(_no_solution_detail(response))

        try:
            return extract(solution)
        except TaskError:
            raise
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise MalformedResponseError(f"cannot extract solution: {e!r}") from e
