"""Pytest configuration and fixtures."""

import json

import httpx
import pytest

from recaptcha_verify.config import get_settings

SUCCESS_V2 = {
    "success": True,
    "challenge_ts": "2024-05-01T12:30:45Z",
    "hostname": "example.com",
}

SUCCESS_V3 = {
    "success": True,
    "score": 0.9,
    "action": "login",
    "challenge_ts": "2024-05-01T12:30:45Z",
    "hostname": "example.com",
}

FAILURE = {
    "success": False,
    "error-codes": ["invalid-input-response", "invalid-input-secret"],
}


class RecordingTransport(httpx.MockTransport):
    """Mock transport answering with a fixed JSON payload and keeping requests."""

    def __init__(self, payload=None, status_code: int = 200, content: bytes | None = None):
        self.requests: list[httpx.Request] = []
        if content is None:
            content = json.dumps(payload).encode()

        def handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return httpx.Response(status_code, content=content)

        super().__init__(handler)


@pytest.fixture
def recaptcha_settings(monkeypatch):
    """Settings with a configured secret key."""
    monkeypatch.setenv("RECAPTCHA_SECRET_KEY", "test-secret")
    monkeypatch.setenv("RECAPTCHA_ENABLED", "true")
    monkeypatch.setenv("RECAPTCHA_MIN_SCORE", "0.5")
    monkeypatch.setenv("RECAPTCHA_TIMEOUT", "5")
    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()
