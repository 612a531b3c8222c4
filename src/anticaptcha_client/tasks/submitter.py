# src/anticaptcha_client/tasks/submitter.py

from __future__ import annotations

import logging
from typing import Any

from ..core.errors import (
    MalformedResponseError,
    RemoteError,
    TaskError,
    UnknownRemoteError,
    UnknownResponseError,
)
from ..core.ports import Transport
from .task_models import TaskHandle, TaskRequest, is_numeric

logger = logging.getLogger(__name__)


def endpoint(base_url: str, method: str) -> str:
    return base_url.rstrip("/") + "/" + method


def parse_create_response(response: Any) -> TaskHandle:
    """
    Turn a createTask response into a TaskHandle or raise a classified TaskError.

    A numeric taskId wins: the service answers success as {"errorId": 0, "taskId": N}.
    A non-zero errorId outranks a broken taskId, so the remote description is kept.
    """
    if not isinstance(response, dict):
        raise UnknownResponseError(f"expected JSON object, got {type(response).__name__}")

    task_id = response.get("taskId")
    if is_numeric(task_id):
        return TaskHandle(task_id)

    has_task_id = "taskId" in response
    if "errorId" not in response or (has_task_id and response["errorId"] == 0):
        if has_task_id:
            raise MalformedResponseError(f"taskId is {type(task_id).__name__}, expected number")
        raise UnknownResponseError()

    description = response.get("errorDescription")
    if description is None:
        raise UnknownRemoteError(f"errorId={response['errorId']}")
    if not isinstance(description, str):
        raise MalformedResponseError(
            f"errorDescription is {type(description).__name__}, expected string"
        )
    raise RemoteError(description)


class TaskSubmitter:
    """Sends createTask for one TaskRequest variant and returns the assigned handle."""

    def __init__(self, transport: Transport, *, api_key: str, base_url: str) -> None:
        self._transport = transport
        self._api_key = api_key
        self._url = endpoint(base_url, "createTask")

    async def submit(self, request: TaskRequest) -> TaskHandle:
        body = {
            "clientKey": self._api_key,
            "task": request.to_payload(),
        }
        response = await self._transport.post(self._url, body)

        try:
            handle = parse_create_response(response)
        except TaskError as e:
            logger.info("createTask rejected type=%s (%s)", request.TASK_TYPE, e)
            raise

        logger.info("createTask accepted type=%s task_id=%s", request.TASK_TYPE, handle)
        return handle
