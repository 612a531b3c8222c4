# src/anticaptcha_client/transport/http.py

from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from ..core.errors import TransportError
from ..core.ports import JsonObject

logger = logging.getLogger(__name__)

DEBUG_PROXY_URL = "http://localhost:8888"


def _make_timeout_obj(request_timeout: float) -> httpx.Timeout:
    """
    One bound per single request; the polling loop has its own attempt limit.
    Connect gets the same budget, capped so a dead host fails fast.
    """
    return httpx.Timeout(
        request_timeout,
        connect=min(request_timeout, 10.0),
    )


class HttpxTransport:
    """
    Transport port implemented on httpx.AsyncClient.

    Behavior:
    - POSTs the body as JSON, decodes the reply as JSON.
    - HTTP status codes are not interpreted: the service reports errors in the body.
    - Unencodable request bodies, network errors, timeouts and undecodable replies -> TransportError.
    """

    def __init__(
        self,
        *,
        request_timeout: float = 60.0,
        proxy_url: str | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._owns_client = client is None
        if client is None:
            client = httpx.AsyncClient(
                timeout=_make_timeout_obj(request_timeout),
                proxy=proxy_url or None,
                headers={"Accept": "application/json"},
            )
            if proxy_url:
                logger.info("HTTP transport: routing requests through proxy %s", proxy_url)
        self._client = client

    async def post(self, url: str, body: JsonObject) -> Any:
        try:
            request = self._client.build_request("POST", url, json=body)
        except (TypeError, ValueError) as e:
            raise TransportError(f"cannot encode request body for {url}: {e}") from e

        try:
            response = await self._client.send(request)
        except httpx.HTTPError as e:
            logger.info("HTTP transport: %s failed (%s)", url, e.__class__.__name__)
            raise TransportError(f"{e.__class__.__name__}: {e}") from e

        logger.debug("HTTP transport: %s -> %s", url, response.status_code)

        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise TransportError(
                f"undecodable response from {url} (HTTP {response.status_code})"
            ) from e

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> HttpxTransport:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
