"""Classify-then-translate pipeline behind the translation endpoint.

Each run performs at most two outbound calls, strictly in sequence: the
classifier decides whether the text is medical content (and fixes its
spelling), then the translator receives the corrected text. Nothing is cached
or retried and no state survives a run.
"""

from __future__ import annotations

from typing import Literal, Optional

from med_translate_engine.core.config import config
from med_translate_engine.core.exceptions import (
    ClassificationServiceError,
    ClassificationTimeoutError,
    ContentRejectedError,
    InvalidRequestError,
)
from med_translate_engine.core.language import LanguagePairRegistry
from med_translate_engine.core.logging import get_logger
from med_translate_engine.core.models import ClassificationResult, TranslationOutcome
from med_translate_engine.core.ports import ClassifierPort, TranslatorPort

logger = get_logger(__name__)

FailurePolicy = Literal["fail_closed", "fail_open"]

NOT_MEDICAL_MESSAGE = "Text is not a valid doctor-patient conversation."
UNVERIFIED_MESSAGE = "Unable to verify that the text is a medical conversation."
UNVERIFIED_TIMEOUT_MESSAGE = (
    "Unable to verify that the text is a medical conversation: the check timed out."
)


def build_language_registry() -> LanguagePairRegistry:
    """Return the registry described by the active configuration."""
    return LanguagePairRegistry.build(
        config.TRANSLATION_MODEL_FAMILY,
        overrides=config.TRANSLATION_MODEL_OVERRIDES,
    )


class TranslationPipeline:
    """Gate text through the classifier, then translate what it approves."""

    def __init__(
        self,
        classifier: ClassifierPort,
        translator: TranslatorPort,
        language_pairs: Optional[LanguagePairRegistry] = None,
        *,
        failure_policy: Optional[FailurePolicy] = None,
        max_text_length: Optional[int] = None,
    ) -> None:
        self._classifier = classifier
        self._translator = translator
        self.language_pairs = language_pairs or build_language_registry()
        self.failure_policy: FailurePolicy = (
            failure_policy or config.CLASSIFICATION_FAILURE_POLICY
        )
        self.max_text_length = max_text_length or config.MAX_TEXT_LENGTH

    def _validate_text(self, text: str) -> str:
        cleaned = (text or "").strip()
        if not cleaned:
            raise InvalidRequestError("text must not be empty")
        if len(cleaned) > self.max_text_length:
            raise InvalidRequestError(
                f"text exceeds the maximum length of {self.max_text_length} characters"
            )
        return cleaned

    async def classify(self, text: str) -> ClassificationResult:
        """Run the classifier and apply the failure policy when it errors."""
        try:
            return await self._classifier.classify(text)
        except ClassificationServiceError as exc:
            if self.failure_policy == "fail_open":
                logger.warning("Classification failed; allowing text through: %s", exc)
                return ClassificationResult(
                    is_conversation=True, reason="", corrected_text=text
                )
            logger.error("Classification failed; rejecting text: %s", exc)
            reason = (
                UNVERIFIED_TIMEOUT_MESSAGE
                if isinstance(exc, ClassificationTimeoutError)
                else UNVERIFIED_MESSAGE
            )
            return ClassificationResult(is_conversation=False, reason=reason, corrected_text=text)

    async def run(self, text: str, source_lang: str, target_lang: str) -> TranslationOutcome:
        """Validate, classify, and translate ``text``.

        Raises ``InvalidRequestError`` (including unsupported pairs) before any
        outbound call, ``ContentRejectedError`` when the classifier rejects the
        text, and lets configuration and translation errors propagate.
        """
        cleaned = self._validate_text(text)
        pair, model_id = self.language_pairs.resolve(source_lang, target_lang)

        classification = await self.classify(cleaned)
        if not classification.is_conversation:
            logger.info("Rejected non-medical text for %s", pair)
            raise ContentRejectedError(classification.reason or NOT_MEDICAL_MESSAGE)

        corrected = classification.corrected_text
        to_translate = corrected if corrected.strip() else cleaned
        result = await self._translator.translate(to_translate, model_id)
        return TranslationOutcome(
            original_text=cleaned,
            corrected_text=to_translate,
            translated_text=result.translated_text,
            pair=pair,
            model_id=model_id,
        )


__all__ = [
    "FailurePolicy",
    "NOT_MEDICAL_MESSAGE",
    "UNVERIFIED_MESSAGE",
    "UNVERIFIED_TIMEOUT_MESSAGE",
    "TranslationPipeline",
    "build_language_registry",
]
