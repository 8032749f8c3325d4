"""Gemini adapter implementing the classifier port."""

from __future__ import annotations

import json
from typing import Any, Optional

import httpx

from med_translate_engine.core.config import config
from med_translate_engine.core.exceptions import (
    ClassificationServiceError,
    ClassificationTimeoutError,
    MissingConfigurationError,
)
from med_translate_engine.core.logging import get_logger
from med_translate_engine.core.models import ClassificationResult
from med_translate_engine.core.ports import ClassifierPort

logger = get_logger(__name__)

CLASSIFICATION_PROMPT_TEMPLATE = """Analyze the following text to determine if it is related to health, medicine, or a doctor-patient consultation.

- If the text contains any symptom, illness, treatment, medical term, or general health discussion, mark is_convo: true.
- If not, mark is_convo: false and explain why in reason.
- Always correct spelling mistakes but do not change grammar or meaning.

Return JSON with: is_convo, reason, corrected_text.

Text:
"{text}"
"""

CLASSIFICATION_RESPONSE_SCHEMA: dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "is_convo": {"type": "BOOLEAN"},
        "reason": {"type": "STRING"},
        "corrected_text": {"type": "STRING"},
    },
    "propertyOrdering": ["is_convo", "reason", "corrected_text"],
}


def build_classification_payload(text: str) -> dict[str, Any]:
    """Return the generateContent request body for ``text``."""
    prompt = CLASSIFICATION_PROMPT_TEMPLATE.format(text=text)
    return {
        "contents": [{"parts": [{"text": prompt}]}],
        "generationConfig": {
            "responseMimeType": "application/json",
            "responseSchema": CLASSIFICATION_RESPONSE_SCHEMA,
        },
    }


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text[:200] or response.reason_phrase
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict) and isinstance(error.get("message"), str):
            return error["message"]
        if isinstance(error, str) and error:
            return error
    return response.reason_phrase


def extract_candidate_text(body: Any) -> str:
    """Return the first candidate's text part from a generateContent response."""
    if not isinstance(body, dict):
        raise ClassificationServiceError("Classification response is not a JSON object")
    candidates = body.get("candidates")
    if not isinstance(candidates, list) or not candidates:
        raise ClassificationServiceError("Classification response contained no candidates")
    try:
        text = candidates[0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError) as exc:
        raise ClassificationServiceError(
            "Classification candidate is missing its text content"
        ) from exc
    if not isinstance(text, str):
        raise ClassificationServiceError("Classification candidate text is not a string")
    return text


def parse_classification_response(body: Any, original_text: str) -> ClassificationResult:
    """Decode the structured verdict carried inside a generateContent response."""
    candidate_text = extract_candidate_text(body)
    try:
        verdict = json.loads(candidate_text)
    except json.JSONDecodeError as exc:
        raise ClassificationServiceError("Classification verdict is not valid JSON") from exc
    if not isinstance(verdict, dict):
        raise ClassificationServiceError("Classification verdict is not a JSON object")
    return ClassificationResult.from_payload(verdict, original_text)


class GeminiClassifierAdapter(ClassifierPort):
    """Classify text with Gemini's structured JSON output."""

    def __init__(
        self,
        *,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._api_key = api_key if api_key is not None else config.GEMINI_API_KEY
        self._model = model or config.GEMINI_MODEL
        self._base_url = (base_url or config.GEMINI_BASE_URL).rstrip("/")
        self._timeout = timeout if timeout is not None else config.CLASSIFICATION_TIMEOUT_SECONDS
        self._transport = transport

    @property
    def endpoint(self) -> str:
        """URL of the generateContent call, without the key."""
        return f"{self._base_url}/models/{self._model}:generateContent"

    async def classify(self, text: str) -> ClassificationResult:
        if not self._api_key:
            raise MissingConfigurationError("GEMINI_API_KEY", "content classification")

        payload = build_classification_payload(text)
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.post(
                    self.endpoint, headers={"x-goog-api-key": self._api_key}, json=payload
                )
        except httpx.TimeoutException as exc:
            raise ClassificationTimeoutError(
                f"Classification service timed out after {self._timeout:g}s"
            ) from exc
        except httpx.HTTPError as exc:
            raise ClassificationServiceError(
                f"Classification request failed: {exc.__class__.__name__}"
            ) from exc

        if response.status_code >= 400:
            message = _error_message(response)
            logger.error(
                "Classification call to %s failed with HTTP %s: %s",
                self.endpoint,
                response.status_code,
                message,
            )
            raise ClassificationServiceError(
                f"Classification service returned HTTP {response.status_code}: {message}"
            )

        try:
            body = response.json()
        except ValueError as exc:
            raise ClassificationServiceError("Classification response is not valid JSON") from exc

        result = parse_classification_response(body, text)
        logger.info(
            "Classification verdict: is_convo=%s corrected=%s",
            result.is_conversation,
            result.corrected_text != text,
        )
        return result


__all__ = [
    "CLASSIFICATION_PROMPT_TEMPLATE",
    "CLASSIFICATION_RESPONSE_SCHEMA",
    "GeminiClassifierAdapter",
    "build_classification_payload",
    "extract_candidate_text",
    "parse_classification_response",
]
