# tests/conftest.py

from __future__ import annotations

import pytest

from anticaptcha_client.client import AntiCaptchaClient
from anticaptcha_client.tasks.resolver import TaskResolver
from anticaptcha_client.tasks.submitter import TaskSubmitter

from .fakes import FakeSleeper, FakeTransport

API_KEY = "test-client-key"
BASE_URL = "https://api.example.test/"


@pytest.fixture()
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture()
def sleeper() -> FakeSleeper:
    return FakeSleeper()


@pytest.fixture()
def submitter(transport: FakeTransport) -> TaskSubmitter:
    return TaskSubmitter(transport, api_key=API_KEY, base_url=BASE_URL)


@pytest.fixture()
def resolver(transport: FakeTransport, sleeper: FakeSleeper) -> TaskResolver:
    """Resolver with a short interval and a recording sleeper: tests never really wait."""
    return TaskResolver(
        transport,
        api_key=API_KEY,
        base_url=BASE_URL,
        poll_interval=3.0,
        max_attempts=5,
        sleeper=sleeper,
    )


@pytest.fixture()
def client(transport: FakeTransport, sleeper: FakeSleeper) -> AntiCaptchaClient:
    return AntiCaptchaClient(
        transport,
        api_key=API_KEY,
        base_url=BASE_URL,
        poll_interval=3.0,
        max_attempts=5,
        sleeper=sleeper,
    )
