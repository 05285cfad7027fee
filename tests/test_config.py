"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest

from wikidocumentaries.config import Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "WIKIDOCUMENTARIES_API_USER_AGENT",
        "WIKIPEDIA_REQUEST_TIMEOUT",
        "WIKIPEDIA_RETRY_MAX",
        "WIKIPEDIA_RETRY_BASE_DELAY",
    ):
        monkeypatch.delenv(name, raising=False)

    s = Settings()
    assert s.api_user_agent == ""
    assert s.request_timeout == 10.0
    assert s.retry_max == 2
    assert s.retry_base_delay == 0.5


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WIKIDOCUMENTARIES_API_USER_AGENT", "Wikidocumentaries/2.0 (ops@example.org)")
    monkeypatch.setenv("WIKIPEDIA_REQUEST_TIMEOUT", "3.5")
    monkeypatch.setenv("WIKIPEDIA_RETRY_MAX", "0")

    s = Settings()
    assert s.api_user_agent == "Wikidocumentaries/2.0 (ops@example.org)"
    assert s.request_timeout == 3.5
    assert s.retry_max == 0
    assert s.request_headers == {"Api-User-Agent": "Wikidocumentaries/2.0 (ops@example.org)"}
