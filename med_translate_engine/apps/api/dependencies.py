"""Shared FastAPI dependencies for service access."""

from typing import Annotated

from fastapi import Depends, HTTPException, status

from med_translate_engine.core.language import LanguagePairRegistry
from med_translate_engine.services import ServiceContainer, runtime
from med_translate_engine.services.translation_pipeline import TranslationPipeline


def get_service_container() -> ServiceContainer:
    """Resolve the globally configured service container."""
    try:
        return runtime.get_services()
    except RuntimeError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Service container not configured",
        ) from exc


def get_translation_pipeline(
    container: Annotated[ServiceContainer, Depends(get_service_container)],
) -> TranslationPipeline:
    """Return the classify-then-translate pipeline bound to the active container."""
    if container.pipeline is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Translation pipeline is unavailable",
        )
    return container.pipeline


def get_language_pairs(
    container: Annotated[ServiceContainer, Depends(get_service_container)],
) -> LanguagePairRegistry:
    """Return the supported language pair registry."""
    if container.language_pairs is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Language pair registry is unavailable",
        )
    return container.language_pairs


__all__ = [
    "get_language_pairs",
    "get_service_container",
    "get_translation_pipeline",
]
