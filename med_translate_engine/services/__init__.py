"""Application service layer wiring for the translation endpoint."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from med_translate_engine.core.language import LanguagePairRegistry
from med_translate_engine.core.ports import ClassifierPort, TranslatorPort

if TYPE_CHECKING:  # pragma: no cover - type narrowing only
    from .translation_pipeline import TranslationPipeline


@dataclass(slots=True)
class ServiceContainer:
    """Aggregate of application-level services available to handlers."""

    classifier: Optional[ClassifierPort] = None
    translator: Optional[TranslatorPort] = None
    language_pairs: Optional[LanguagePairRegistry] = None
    pipeline: Optional["TranslationPipeline"] = None


def build_default_services(
    *,
    classifier_port: Optional[ClassifierPort] = None,
    translator_port: Optional[TranslatorPort] = None,
    language_pairs: Optional[LanguagePairRegistry] = None,
) -> ServiceContainer:
    """Return a service container with the pipeline wired to the given ports."""

    from .translation_pipeline import (  # pylint: disable=import-outside-toplevel
        TranslationPipeline,
        build_language_registry,
    )

    registry = language_pairs or build_language_registry()
    pipeline = None
    if classifier_port is not None and translator_port is not None:
        pipeline = TranslationPipeline(classifier_port, translator_port, registry)
    return ServiceContainer(
        classifier=classifier_port,
        translator=translator_port,
        language_pairs=registry,
        pipeline=pipeline,
    )


__all__ = ["ServiceContainer", "build_default_services"]
