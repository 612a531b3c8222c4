# src/anticaptcha_client/core/errors.py

"""
Error taxonomy for the task lifecycle.

Every failure reaching the caller is a TaskError subclass with a stable `kind`.
Nothing here is retried by the core: retry policy belongs to the caller.
"""

from __future__ import annotations

from enum import StrEnum


class TaskErrorKind(StrEnum):
    TRANSPORT = "transport"
    UNKNOWN_RESPONSE = "unknown_response"
    UNKNOWN_ERROR = "unknown_error"
    REMOTE = "remote"
    MALFORMED_RESPONSE = "malformed_response"
    NO_SOLUTION = "no_solution"
    TIMEOUT = "timeout"
    CANCELLED = "cancelled"


class ConfigError(RuntimeError):
    """Client cannot be built from the current settings (e.g. missing API key)."""


class TaskError(Exception):
    kind: TaskErrorKind = TaskErrorKind.UNKNOWN_RESPONSE
    default_message = "anti-captcha: task failed"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail
        super().__init__(f"{self.default_message}: {detail}" if detail else self.default_message)


class TransportError(TaskError):
    kind = TaskErrorKind.TRANSPORT
    default_message = "anti-captcha: transport error"


class UnknownResponseError(TaskError):
    kind = TaskErrorKind.UNKNOWN_RESPONSE
    default_message = "anti-captcha: unknown response"


class UnknownRemoteError(TaskError):
    kind = TaskErrorKind.UNKNOWN_ERROR
    default_message = "anti-captcha: unknown error"


class RemoteError(TaskError):
    """The service rejected the request and said why (bad key, zero balance, ...)."""

    kind = TaskErrorKind.REMOTE

    def __init__(self, description: str) -> None:
        self.description = description
        self.detail = description
        Exception.__init__(self, description)


class MalformedResponseError(TaskError):
    kind = TaskErrorKind.MALFORMED_RESPONSE
    default_message = "anti-captcha: malformed response"


class NoSolutionError(TaskError):
    kind = TaskErrorKind.NO_SOLUTION
    default_message = "anti-captcha: solution is null"


class TaskTimeoutError(TaskError):
    kind = TaskErrorKind.TIMEOUT
    default_message = "anti-captcha: task still processing"


class TaskCancelledError(TaskError):
    kind = TaskErrorKind.CANCELLED
    default_message = "anti-captcha: task resolution cancelled"
