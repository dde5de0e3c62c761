"""Shared fixtures for the Xverify client test suite."""

import json
import logging

import httpx
import pytest

from xverify_client.config.settings import get_settings
from xverify_client.logging.audit import get_audit_logger
from xverify_client.verification.client import VerificationClient


class TransportSpy:
    """Records every request and answers with a canned response or error."""

    def __init__(self, status_code: int = 200, body=None, raw: bytes | None = None, error: Exception | None = None):
        self.status_code = status_code
        self.body = body if body is not None else {}
        self.raw = raw
        self.error = error
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.raw is not None:
            return httpx.Response(self.status_code, content=self.raw)
        return httpx.Response(self.status_code, content=json.dumps(self.body).encode())

    @property
    def call_count(self) -> int:
        return len(self.requests)

    @property
    def last_params(self) -> dict:
        return dict(self.requests[-1].url.params)


@pytest.fixture
def spy() -> TransportSpy:
    return TransportSpy(body={"result": "valid"})


@pytest.fixture
def make_client():
    """Factory fixture: build a client wired to a TransportSpy."""
    clients = []

    def _make(spy: TransportSpy, **config) -> VerificationClient:
        client = VerificationClient(
            api_key="key-123",
            domain="example.com",
            config_options={"transport": httpx.MockTransport(spy), **config},
        )
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.close()


@pytest.fixture
def override_settings(monkeypatch):
    """Factory fixture: set env vars and clear settings cache.

    Usage:
        override_settings(XVERIFY_API_KEY="k", XVERIFY_DOMAIN="example.com")
    """
    def _override(**kwargs):
        for key, value in kwargs.items():
            monkeypatch.setenv(key.upper(), str(value))
        get_settings.cache_clear()

    yield _override

    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def reset_audit_logger():
    """Undo setup_logging() so handlers never outlive pytest's captured stdout."""
    yield
    logger = get_audit_logger()
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
