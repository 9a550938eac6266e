"""Tests for the server entrypoint's logging setup."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from text_rewriter.api import main


@pytest.mark.parametrize(
    "name, level",
    [
        (None, logging.INFO),
        ("", logging.INFO),
        ("debug", logging.DEBUG),
        (" Warning ", logging.WARNING),
        ("ERROR", logging.ERROR),
        ("verbose", logging.INFO),
        ("42", logging.INFO),
    ],
)
def test_resolve_log_level(name: str | None, level: int) -> None:
    assert main.resolve_log_level(name) == level


def test_unknown_log_level_does_not_break_startup(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict[str, Any]] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    monkeypatch.setenv("LOG_LEVEL", "verbose")

    main.configure_logging()

    assert calls == [{"level": logging.INFO, "format": main.LOG_FORMAT}]
