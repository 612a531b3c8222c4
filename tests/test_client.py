# tests/test_client.py

from __future__ import annotations

import asyncio
import base64

import pytest

from anticaptcha_client.client import AntiCaptchaClient
from anticaptcha_client.core.errors import RemoteError, TaskCancelledError

from .conftest import API_KEY, BASE_URL
from .fakes import FakeSleeper, FakeTransport


@pytest.mark.asyncio
async def test_solve_recaptcha_end_to_end(client, transport, sleeper) -> None:
    transport.push(
        {"errorId": 0, "taskId": 7654321},
        {"status": "processing"},
        {"status": "ready", "solution": {"gRecaptchaResponse": "03AGdBq2"}},
    )

    token = await client.solve_recaptcha("https://example.com", "site-key")

    assert token == "03AGdBq2"
    assert transport.urls() == [
        BASE_URL + "createTask",
        BASE_URL + "getTaskResult",
        BASE_URL + "getTaskResult",
    ]
    assert transport.sent[1].body == {"clientKey": API_KEY, "taskId": 7654321}
    assert sleeper.calls == [3.0]


@pytest.mark.asyncio
async def test_solve_image_encodes_raw_bytes(client, transport) -> None:
    transport.push({"taskId": 3}, {"status": "ready", "solution": {"text": "XY42"}})

    assert await client.solve_image(b"png-bytes") == "XY42"
    assert transport.sent[0].body["task"]["body"] == base64.b64encode(b"png-bytes").decode("ascii")


@pytest.mark.asyncio
async def test_solve_image_accepts_base64_text(client, transport) -> None:
    transport.push({"taskId": 3}, {"status": "ready", "solution": {"text": "XY42"}})

    await client.solve_image("aGVsbG8=")
    assert transport.sent[0].body["task"]["body"] == "aGVsbG8="


@pytest.mark.asyncio
async def test_submission_failure_skips_polling(client, transport) -> None:
    transport.push({"errorId": 10, "errorDescription": "Account has zero or negative balance"})

    with pytest.raises(RemoteError, match="zero or negative balance"):
        await client.solve_recaptcha("https://example.com", "site-key")

    assert transport.urls() == [BASE_URL + "createTask"]


@pytest.mark.asyncio
async def test_context_manager_closes_owned_transport() -> None:
    transport = FakeTransport()
    async with AntiCaptchaClient(transport, api_key=API_KEY, owns_transport=True):
        pass
    assert transport.closed


@pytest.mark.asyncio
async def test_context_manager_leaves_borrowed_transport_open() -> None:
    transport = FakeTransport()
    async with AntiCaptchaClient(transport, api_key=API_KEY):
        pass
    assert not transport.closed


@pytest.mark.asyncio
async def test_solve_recaptcha_forwards_cancel_event(transport) -> None:
    cancel = asyncio.Event()

    async def sleeper(seconds: float) -> None:
        cancel.set()

    transport.push({"taskId": 9}, {"status": "processing"}, {"status": "ready", "solution": {"gRecaptchaResponse": "x"}})
    client = AntiCaptchaClient(transport, api_key=API_KEY, base_url=BASE_URL, sleeper=sleeper)

    with pytest.raises(TaskCancelledError):
        await client.solve_recaptcha("https://example.com", "site-key", cancel_event=cancel)

    assert len(transport.sent) == 2


@pytest.mark.asyncio
async def test_solve_image_forwards_cancel_event(transport) -> None:
    cancel = asyncio.Event()
    cancel.set()

    transport.push({"taskId": 9}, {"status": "processing"})
    client = AntiCaptchaClient(transport, api_key=API_KEY, base_url=BASE_URL, sleeper=FakeSleeper())

    with pytest.raises(TaskCancelledError):
        await client.solve_image(b"png", cancel_event=cancel)
