"""
Shared fixtures.

FakeCaptchaService is a hand-rolled stand-in for CaptchaService that records
every call, so route tests can assert on what the handler passed through
(or that the service was never reached).
"""

from __future__ import annotations

from typing import Callable, Optional

import pytest
from fastapi.testclient import TestClient

from app import create_app
from config import AppSettings
from infrastructure.captcha.protocol import Challenge


class FakeCaptchaService:
    def __init__(
        self,
        generate_func: Optional[Callable[[], Challenge]] = None,
        verify_func: Optional[Callable[[str, str], None]] = None,
    ) -> None:
        self._generate = generate_func or (
            lambda: Challenge(image="data:image/png;base64,abc123", text="AB12", token="tok-xyz")
        )
        self._verify = verify_func or (lambda text, token: None)
        self.generate_calls = 0
        self.verify_calls: list[tuple[str, str]] = []

    def generate(self) -> Challenge:
        self.generate_calls += 1
        return self._generate()

    def verify(self, text: str, token: str) -> None:
        self.verify_calls.append((text, token))
        self._verify(text, token)


@pytest.fixture
def settings(monkeypatch) -> AppSettings:
    """AppSettings built from a controlled environment."""
    monkeypatch.setenv("CAPTCHA_SECRET_KEY", "test-secret-key-0123456789abcdef")
    monkeypatch.setenv("ENV", "test")
    return AppSettings()


@pytest.fixture
def fake_service() -> FakeCaptchaService:
    return FakeCaptchaService()


@pytest.fixture
def make_client(settings) -> Callable[..., TestClient]:
    """Build a TestClient around create_app() with an injected service."""

    def _make(captcha_service=None) -> TestClient:
        app = create_app(settings, captcha_service=captcha_service)
        return TestClient(app, raise_server_exceptions=False)

    return _make


@pytest.fixture
def fake_service_cls() -> type[FakeCaptchaService]:
    """The fake class itself, for tests that need custom behaviour."""
    return FakeCaptchaService
