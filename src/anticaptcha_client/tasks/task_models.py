# src/anticaptcha_client/tasks/task_models.py

from __future__ import annotations

import base64
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Any, ClassVar

from ..core.errors import MalformedResponseError
from ..core.ports import JsonObject


class TaskStatus(StrEnum):
    """
    Status reported by getTaskResult.

    Only PROCESSING keeps the resolver polling; READY and UNKNOWN are both terminal.
    """

    PROCESSING = "processing"
    READY = "ready"
    UNKNOWN = "unknown"

    @classmethod
    def from_response(cls, raw: Any) -> TaskStatus:
        if raw == cls.PROCESSING.value:
            return cls.PROCESSING
        if raw == cls.READY.value:
            return cls.READY
        return cls.UNKNOWN


@dataclass(frozen=True, slots=True)
class TaskHandle:
    """Identifier assigned by createTask; sent back verbatim in every status query."""

    task_id: int | float

    def __str__(self) -> str:
        return str(self.task_id)


def is_numeric(value: Any) -> bool:
    # bool is an int subclass, but `"taskId": true` is not an identifier.
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _solution_field(solution: Any, field: str) -> str:
    if not isinstance(solution, dict):
        raise MalformedResponseError(f"solution is {type(solution).__name__}, expected object")
    if field not in solution:
        raise MalformedResponseError(f"solution has no {field!r} field")
    value = solution[field]
    if not isinstance(value, str):
        raise MalformedResponseError(f"solution field {field!r} is {type(value).__name__}, expected string")
    return value


@dataclass(frozen=True, slots=True)
class RecaptchaTask:
    """reCAPTCHA v2 solved by the service's own workers (no proxy)."""

    TASK_TYPE: ClassVar[str] = "NoCaptchaTaskProxyless"
    SOLUTION_FIELD: ClassVar[str] = "gRecaptchaResponse"

    website_url: str
    website_key: str

    def to_payload(self) -> JsonObject:
        return {
            "type": self.TASK_TYPE,
            "websiteURL": self.website_url,
            "websiteKey": self.website_key,
        }

    def extract_solution(self, solution: Any) -> str:
        return _solution_field(solution, self.SOLUTION_FIELD)


@dataclass(frozen=True, slots=True)
class ImageTask:
    """Image-to-text recognition; `body` is the base64-encoded image."""

    TASK_TYPE: ClassVar[str] = "ImageToTextTask"
    SOLUTION_FIELD: ClassVar[str] = "text"

    body: str

    @classmethod
    def from_bytes(cls, data: bytes) -> ImageTask:
        return cls(body=base64.b64encode(data).decode("ascii"))

    @classmethod
    def from_path(cls, path: str | Path) -> ImageTask:
        return cls.from_bytes(Path(path).read_bytes())

    def to_payload(self) -> JsonObject:
        return {
            "type": self.TASK_TYPE,
            "body": self.body,
        }

    def extract_solution(self, solution: Any) -> str:
        return _solution_field(solution, self.SOLUTION_FIELD)


TaskRequest = RecaptchaTask | ImageTask
