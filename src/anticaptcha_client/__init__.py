"""
Anti-Captcha task client.

Components:
- tasks/task_models.py: task variants (RecaptchaTask, ImageTask), TaskHandle, TaskStatus
- tasks/submitter.py: createTask + response classification
- tasks/resolver.py: getTaskResult polling loop
- client.py: AntiCaptchaClient (submit, then resolve)
- transport/http.py: httpx-based Transport
"""

from .client import AntiCaptchaClient
from .core.errors import (
    ConfigError,
    MalformedResponseError,
    NoSolutionError,
    RemoteError,
    TaskCancelledError,
    TaskError,
    TaskErrorKind,
    TaskTimeoutError,
    TransportError,
    UnknownRemoteError,
    UnknownResponseError,
)
from .tasks.task_models import ImageTask, RecaptchaTask, TaskHandle, TaskRequest, TaskStatus
from .transport.http import HttpxTransport

__all__ = [
    "AntiCaptchaClient",
    "ConfigError",
    "HttpxTransport",
    "ImageTask",
    "MalformedResponseError",
    "NoSolutionError",
    "RecaptchaTask",
    "RemoteError",
    "TaskCancelledError",
    "TaskError",
    "TaskErrorKind",
    "TaskHandle",
    "TaskRequest",
    "TaskStatus",
    "TaskTimeoutError",
    "TransportError",
    "UnknownRemoteError",
    "UnknownResponseError",
]
