# src/anticaptcha_client/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The submitter and resolver depend on these Protocols instead of an HTTP library.
This keeps the transport swappable and lets tests script responses and fake the clock.
"""

from typing import Any, Awaitable, Protocol

JsonObject = dict[str, Any]
# Decoded JSON body: string keys, dynamically-typed values.


class Transport(Protocol):
    """
    One request/response exchange with the remote service.

    Implementations:
    - serialize `body` as JSON and POST it to `url`,
    - return the decoded JSON (usually a JsonObject, but not guaranteed),
    - raise TransportError on network or decode failure,
    - enforce their own per-request timeout.
    """

    async def post(self, url: str, body: JsonObject) -> Any: ...


class Sleeper(Protocol):
    """Suspension between polls (asyncio.sleep in production)."""

    def __call__(self, seconds: float) -> Awaitable[None]: ...
