"""Shared fixtures: settings snapshots and a stub for `requests.post`."""

from __future__ import annotations

import json
from typing import Any

import pytest
import requests

from text_rewriter.llm.provider_config import Settings

VALID_API_KEY = "AIzaSyTestKey1234567890"


class FakeResponse:
    """Minimal stand-in for `requests.Response` as used by the client."""

    def __init__(self, status_code: int, body: str = "", reason: str = "", read_error: Exception | None = None):
        self.status_code = status_code
        self.reason = reason
        self._body = body
        self._read_error = read_error
        self.closed = False

    @property
    def text(self) -> str:
        if self._read_error is not None:
            raise self._read_error
        return self._body

    def __enter__(self) -> FakeResponse:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.closed = True


class FakePost:
    """Records calls to `requests.post` and replays a canned outcome."""

    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []
        self._response: FakeResponse | None = FakeResponse(200, "{}", "OK")
        self._error: Exception | None = None

    def respond(self, status_code: int, body: Any, reason: str = "", read_error: Exception | None = None) -> FakeResponse:
        if not isinstance(body, str):
            body = json.dumps(body)
        self._response = FakeResponse(status_code, body, reason, read_error)
        self._error = None
        return self._response

    def fail(self, error: Exception) -> None:
        self._error = error

    def __call__(self, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"url": url, **kwargs})
        if self._error is not None:
            raise self._error
        assert self._response is not None
        return self._response


def gemini_body(text: Any) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}


@pytest.fixture
def settings() -> Settings:
    return Settings(api_key=VALID_API_KEY, model_name="gemini-1.5-flash", timeout=5.0)


@pytest.fixture
def fake_post(monkeypatch: pytest.MonkeyPatch) -> FakePost:
    stub = FakePost()
    monkeypatch.setattr(requests, "post", stub)
    return stub


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("GEMINI_API_KEY", "GEMINI_MODEL", "GEMINI_TIMEOUT", "HOST", "PORT"):
        monkeypatch.delenv(name, raising=False)
