"""Protocol definitions for infrastructure adapters."""

# pylint: disable=unnecessary-ellipsis

from __future__ import annotations

from typing import Protocol

from med_translate_engine.core.models import ClassificationResult, TranslationResult


class ClassifierPort(Protocol):
    """Port deciding whether text is medical content and fixing its spelling."""

    async def classify(self, text: str) -> ClassificationResult:
        """Return the verdict for ``text``.

        Raises ``ClassificationServiceError`` when no verdict can be produced.
        """
        ...


class TranslatorPort(Protocol):
    """Port exposing machine translation through a hosted model."""

    async def translate(self, text: str, model_id: str) -> TranslationResult:
        """Translate ``text`` with the model identified by ``model_id``.

        Raises ``TranslationServiceError`` on failure.
        """
        ...


__all__ = ["ClassifierPort", "TranslatorPort"]
