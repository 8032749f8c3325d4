"""Medical conversation translation routes."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from med_translate_engine.apps.api.dependencies import (
    get_language_pairs,
    get_translation_pipeline,
)
from med_translate_engine.core.api_models import (
    ErrorResponse,
    LanguagePairInfo,
    LanguagePairsResponse,
    TranslateRequest,
    TranslateResponse,
)
from med_translate_engine.core.config import config
from med_translate_engine.core.exceptions import (
    ContentRejectedError,
    InvalidRequestError,
    MedTranslateError,
    TranslationTimeoutError,
)
from med_translate_engine.core.language import LanguagePairRegistry
from med_translate_engine.core.logging import get_logger
from med_translate_engine.services.translation_pipeline import TranslationPipeline

router = APIRouter(prefix="/api", tags=["translate"])
logger = get_logger(__name__)

_ERROR_RESPONSES: dict[int | str, dict] = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_405_METHOD_NOT_ALLOWED: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    status.HTTP_504_GATEWAY_TIMEOUT: {"model": ErrorResponse},
}


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.post("/translate", response_model=TranslateResponse, responses=_ERROR_RESPONSES)
async def translate_endpoint(
    payload: TranslateRequest,
    pipeline: Annotated[TranslationPipeline, Depends(get_translation_pipeline)],
):
    """Check that the text is a medical conversation, then translate it.

    Returns 400 for invalid input, unsupported language pairs, or non-medical
    text; 504 when the translation service times out; 500 for any other
    failure.
    """
    logger.info(
        "translate request received: %s -> %s (%d chars)",
        payload.source_lang,
        payload.target_lang,
        len(payload.text),
    )
    try:
        outcome = await pipeline.run(payload.text, payload.source_lang, payload.target_lang)
    except InvalidRequestError as exc:
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))
    except ContentRejectedError as exc:
        return _error(status.HTTP_400_BAD_REQUEST, exc.reason)
    except TranslationTimeoutError as exc:
        logger.error("Translation timed out: %s", exc)
        return _error(status.HTTP_504_GATEWAY_TIMEOUT, str(exc))
    except MedTranslateError as exc:
        logger.error("Translation request failed: %s", exc)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))
    except Exception as exc:  # pylint: disable=broad-except
        logger.exception("Unexpected error while translating")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc) or "Internal server error")

    body = TranslateResponse(
        translated_text=outcome.translated_text,
        corrected_text=outcome.corrected_text if config.INCLUDE_CORRECTED_TEXT else None,
    )
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=body.model_dump(by_alias=True, exclude_none=True),
    )


@router.get("/languages", response_model=LanguagePairsResponse)
async def list_language_pairs(
    registry: Annotated[LanguagePairRegistry, Depends(get_language_pairs)],
) -> LanguagePairsResponse:
    """List the supported language pairs and the model serving each."""
    return LanguagePairsResponse(
        pairs=[
            LanguagePairInfo(source=pair.source, target=pair.target, model=model_id)
            for pair, model_id in registry.items()
        ]
    )


__all__ = ["router"]
