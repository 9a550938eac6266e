"""Tests for environment-driven settings and API key reporting."""

from __future__ import annotations

import pytest

from tests.conftest import VALID_API_KEY
from text_rewriter.llm.provider_config import (
    DEFAULT_HOST,
    DEFAULT_MODEL_NAME,
    DEFAULT_PORT,
    DEFAULT_TIMEOUT_SECONDS,
    Settings,
    describe_api_key,
    load_settings,
)


def test_defaults_when_environment_is_empty() -> None:
    settings = load_settings()

    assert settings.api_key is None
    assert settings.model_name == DEFAULT_MODEL_NAME
    assert settings.timeout == DEFAULT_TIMEOUT_SECONDS
    assert settings.host == DEFAULT_HOST
    assert settings.port == DEFAULT_PORT


def test_reads_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GEMINI_API_KEY", VALID_API_KEY)
    monkeypatch.setenv("GEMINI_MODEL", "gemini-2.0-flash")
    monkeypatch.setenv("GEMINI_TIMEOUT", "12.5")
    monkeypatch.setenv("HOST", "0.0.0.0")
    monkeypatch.setenv("PORT", "9000")

    settings = load_settings()

    assert settings.api_key == VALID_API_KEY
    assert settings.model_name == "gemini-2.0-flash"
    assert settings.timeout == 12.5
    assert settings.host == "0.0.0.0"
    assert settings.port == 9000


def test_unparseable_numbers_fall_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GEMINI_TIMEOUT", "soon")
    monkeypatch.setenv("PORT", "eighty")

    settings = load_settings()

    assert settings.timeout == DEFAULT_TIMEOUT_SECONDS
    assert settings.port == DEFAULT_PORT


def test_settings_repr_hides_key() -> None:
    assert VALID_API_KEY not in repr(Settings(api_key=VALID_API_KEY))


@pytest.mark.parametrize("api_key", [None, "", "   "])
def test_describe_missing_key(api_key: str | None) -> None:
    report = describe_api_key(Settings(api_key=api_key))

    assert report["status"] == "error"
    assert report["api_key_configured"] is False
    assert "api_key_length" not in report
    assert "api_key_preview" not in report


def test_describe_configured_key() -> None:
    assert describe_api_key(Settings(api_key=f"\t{VALID_API_KEY}\n")) == {
        "status": "ok",
        "message": "API key is configured",
        "api_key_configured": True,
        "api_key_length": len(VALID_API_KEY),
        "api_key_preview": "AIzaSyTe...",
    }
