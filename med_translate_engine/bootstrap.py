"""Application bootstrap helpers for assembling the service container."""

from __future__ import annotations

from med_translate_engine.adapters.gemini import GeminiClassifierAdapter
from med_translate_engine.adapters.huggingface import HuggingFaceTranslatorAdapter
from med_translate_engine.services import ServiceContainer, build_default_services


def build_default_service_container() -> ServiceContainer:
    """Return the default service container wired to production adapters."""

    return build_default_services(
        classifier_port=GeminiClassifierAdapter(),
        translator_port=HuggingFaceTranslatorAdapter(),
    )


__all__ = ["build_default_service_container"]
