"""Pytest configuration: ensure env vars and import path are set early.

This runs before any tests, so modules can import without local path hacks.
Also load .env before setting defaults so real keys are used when present.
"""
from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest
from dotenv import load_dotenv
from fastapi.testclient import TestClient

# Ensure repository root is on sys.path for local package imports
sys.path.append(str(Path(__file__).resolve().parents[1]))

load_dotenv(override=False)

# Ensure required env vars exist for config import in app (fallbacks only)
os.environ.setdefault("GEMINI_API_KEY", "test")
os.environ.setdefault("HF_API_KEY", "test")

# pylint: disable=wrong-import-position
from med_translate_engine.apps.api.app import create_app  # noqa: E402
from med_translate_engine.core.models import (  # noqa: E402
    ClassificationResult,
    TranslationResult,
)
from med_translate_engine.services import build_default_services, runtime  # noqa: E402


class StubClassifier:
    """In-memory classifier port that records every call."""

    def __init__(
        self,
        result: ClassificationResult | None = None,
        error: Exception | None = None,
    ) -> None:
        self.result = result or ClassificationResult(is_conversation=True)
        self.error = error
        self.calls: list[str] = []

    async def classify(self, text: str) -> ClassificationResult:
        self.calls.append(text)
        if self.error is not None:
            raise self.error
        if not self.result.corrected_text:
            return ClassificationResult(
                is_conversation=self.result.is_conversation,
                reason=self.result.reason,
                corrected_text=text,
            )
        return self.result


class StubTranslator:
    """In-memory translator port that records every call."""

    def __init__(self, translated_text: str = "", error: Exception | None = None) -> None:
        self.translated_text = translated_text
        self.error = error
        self.calls: list[tuple[str, str]] = []

    async def translate(self, text: str, model_id: str) -> TranslationResult:
        self.calls.append((text, model_id))
        if self.error is not None:
            raise self.error
        return TranslationResult(translated_text=self.translated_text, model_id=model_id)


@pytest.fixture
def classifier() -> StubClassifier:
    """Classifier stub that approves text unchanged by default."""
    return StubClassifier()


@pytest.fixture
def translator() -> StubTranslator:
    """Translator stub returning a fixed French sentence by default."""
    return StubTranslator(translated_text="Le patient a de la fièvre")


@pytest.fixture
def client(classifier: StubClassifier, translator: StubTranslator) -> Iterator[TestClient]:
    """Test client whose pipeline is wired to the classifier/translator stubs."""
    services = build_default_services(classifier_port=classifier, translator_port=translator)
    app = create_app(services)
    yield TestClient(app)
    runtime.clear_services()
