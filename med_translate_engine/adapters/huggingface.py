"""Hugging Face Inference API adapter implementing the translator port."""

from __future__ import annotations

from typing import Any, Optional

import httpx

from med_translate_engine.core.config import config
from med_translate_engine.core.exceptions import (
    MissingConfigurationError,
    TranslationServiceError,
    TranslationTimeoutError,
)
from med_translate_engine.core.logging import get_logger
from med_translate_engine.core.models import TranslationResult
from med_translate_engine.core.ports import TranslatorPort

logger = get_logger(__name__)

DEFAULT_TRANSLATION_ERROR = "Translation failed"


def extract_translation_text(body: Any) -> str:
    """Return the first candidate's ``translation_text`` or ``""`` when absent."""
    if not isinstance(body, list) or not body:
        return ""
    first = body[0]
    if not isinstance(first, dict):
        return ""
    translated = first.get("translation_text")
    return translated if isinstance(translated, str) else ""


def _service_error_message(body: Any) -> str:
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, str) and error:
            return error
        if isinstance(error, list) and error:
            return "; ".join(str(item) for item in error)
    return DEFAULT_TRANSLATION_ERROR


class HuggingFaceTranslatorAdapter(TranslatorPort):
    """Translate text through a model hosted on the Hugging Face Inference API."""

    def __init__(
        self,
        *,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._api_key = api_key if api_key is not None else config.HF_API_KEY
        self._base_url = (base_url or config.HF_INFERENCE_BASE_URL).rstrip("/")
        self._timeout = timeout if timeout is not None else config.TRANSLATION_TIMEOUT_SECONDS
        self._transport = transport

    def model_url(self, model_id: str) -> str:
        """Return the inference URL for ``model_id``."""
        return f"{self._base_url}/models/{model_id}"

    async def translate(self, text: str, model_id: str) -> TranslationResult:
        if not self._api_key:
            raise MissingConfigurationError("HF_API_KEY", "translation")

        url = self.model_url(model_id)
        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.post(url, headers=headers, json={"inputs": text})
        except httpx.TimeoutException as exc:
            raise TranslationTimeoutError(
                f"Translation service timed out after {self._timeout:g}s"
            ) from exc
        except httpx.HTTPError as exc:
            raise TranslationServiceError(
                f"Translation request failed: {exc.__class__.__name__}"
            ) from exc

        try:
            body = response.json()
        except ValueError:
            body = None

        if not response.is_success:
            message = _service_error_message(body)
            logger.error(
                "Translation call to %s failed with HTTP %s: %s",
                url,
                response.status_code,
                message,
            )
            raise TranslationServiceError(message, status_code=response.status_code)

        if body is None:
            raise TranslationServiceError("Translation service returned a non-JSON response")
        if not isinstance(body, list):
            logger.warning("Unexpected translation payload shape from %s", model_id)

        translated = extract_translation_text(body)
        logger.info("Translated %d chars with %s", len(text), model_id)
        return TranslationResult(translated_text=translated, model_id=model_id)


__all__ = [
    "DEFAULT_TRANSLATION_ERROR",
    "HuggingFaceTranslatorAdapter",
    "extract_translation_text",
]
