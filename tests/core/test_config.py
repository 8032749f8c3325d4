"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from med_translate_engine.core.config import Settings

# pylint: disable=missing-function-docstring


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("GEMINI_API_KEY", "HF_API_KEY", "CLASSIFICATION_FAILURE_POLICY"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)  # type: ignore[call-arg]
    assert settings.GEMINI_API_KEY is None
    assert settings.HF_API_KEY is None
    assert settings.GEMINI_MODEL == "gemini-2.5-flash-preview-05-20"
    assert settings.TRANSLATION_MODEL_FAMILY == "Helsinki-NLP/opus-mt"
    assert settings.CLASSIFICATION_FAILURE_POLICY == "fail_closed"
    assert settings.INCLUDE_CORRECTED_TEXT is False
    assert settings.TRANSLATION_MODEL_OVERRIDES == {}


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HF_API_KEY", "hf-secret")
    monkeypatch.setenv("CLASSIFICATION_FAILURE_POLICY", "fail_open")
    monkeypatch.setenv("TRANSLATION_TIMEOUT_SECONDS", "7.5")
    monkeypatch.setenv("TRANSLATION_MODEL_OVERRIDES", '{"en-sw": "Helsinki-NLP/opus-mt-en-swc"}')
    settings = Settings(_env_file=None)  # type: ignore[call-arg]
    assert settings.HF_API_KEY == "hf-secret"
    assert settings.CLASSIFICATION_FAILURE_POLICY == "fail_open"
    assert settings.TRANSLATION_TIMEOUT_SECONDS == 7.5
    assert settings.TRANSLATION_MODEL_OVERRIDES == {"en-sw": "Helsinki-NLP/opus-mt-en-swc"}


def test_invalid_policy_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CLASSIFICATION_FAILURE_POLICY", "maybe")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)  # type: ignore[call-arg]


def test_non_positive_timeout_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CLASSIFICATION_TIMEOUT_SECONDS", "0")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)  # type: ignore[call-arg]
