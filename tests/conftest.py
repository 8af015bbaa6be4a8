"""Shared fixtures for the bnet-wow test suite."""

import json
from datetime import datetime, timezone

import pytest

from bnetwow.clients.factory import reset_current_client
from bnetwow.clients.models import ClientConfig
from bnetwow.config.settings import get_settings
from bnetwow.security.signer import RequestSigner
from bnetwow.transport.base import RawResponse, Transport

FIXED_TIME = datetime(2026, 10, 19, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def anon_config() -> ClientConfig:
    """Unauthenticated US client."""
    return ClientConfig(host="us.api.battle.net", locale="en_US", region="US")


@pytest.fixture
def auth_config() -> ClientConfig:
    """Authenticated US client."""
    return ClientConfig(
        host="us.api.battle.net",
        locale="en_US",
        secret_key="s3cr3t",
        public_key="pub",
        region="US",
    )


@pytest.fixture
def fixed_signer() -> RequestSigner:
    return RequestSigner(clock=lambda: FIXED_TIME)


@pytest.fixture
def override_settings(monkeypatch):
    """Factory fixture: set env vars and clear settings cache.

    Usage:
        override_settings(WOW_REGION="EU", WOW_LOCALE="de_DE")
    """
    def _override(**kwargs):
        for key, value in kwargs.items():
            monkeypatch.setenv(key.upper(), str(value))
        # Clear lru_cache so Settings re-reads env
        get_settings.cache_clear()

    yield _override

    # Always clear cache on teardown so other tests get fresh settings
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def clean_current_client():
    reset_current_client()
    yield
    reset_current_client()


class FakeTransport(Transport):
    """Records requests and replays canned responses."""

    def __init__(self, responses: list[RawResponse] | None = None):
        self.requests = []
        self.responses = list(responses or [])
        self.closed = False

    def queue_json(self, body, status_code: int = 200) -> None:
        self.responses.append(RawResponse(status_code=status_code, content=json.dumps(body).encode()))

    def send(self, request):
        self.requests.append(request)
        return self.responses.pop(0)

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_transport() -> FakeTransport:
    return FakeTransport()
