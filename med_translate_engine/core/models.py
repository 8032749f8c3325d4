"""Core data transfer objects shared across layers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass(slots=True)
class RequestContext:
    """Metadata describing an inbound API request."""

    correlation_id: str
    path: str
    method: str
    user_agent: Optional[str] = None


@dataclass(slots=True, frozen=True)
class LanguagePair:
    """Normalized source/target language codes for a translation."""

    source: str
    target: str

    @property
    def key(self) -> str:
        """Return the ``src-tgt`` key used by the model registry."""
        return f"{self.source}-{self.target}"

    def __str__(self) -> str:
        return self.key


@dataclass(slots=True)
class ClassificationResult:
    """Outcome of the medical-content check for one request."""

    is_conversation: bool
    reason: str = ""
    corrected_text: str = ""

    @classmethod
    def from_payload(cls, data: Mapping[str, Any], original_text: str):
        """Build a result from the classifier's ``is_convo`` JSON payload.

        A missing ``is_convo`` is treated as approval; only an explicit
        ``false`` rejects. Blank or non-string corrections fall back to the
        original text.
        """
        is_convo = data.get("is_convo")
        reason = data.get("reason")
        corrected = data.get("corrected_text")
        return cls(
            is_conversation=is_convo is not False,
            reason=reason.strip() if isinstance(reason, str) else "",
            corrected_text=(
                corrected if isinstance(corrected, str) and corrected.strip() else original_text
            ),
        )


@dataclass(slots=True)
class TranslationResult:
    """Text returned by the translation service."""

    translated_text: str
    model_id: str = ""


@dataclass(slots=True)
class TranslationOutcome:
    """Everything the pipeline hands back after a successful request."""

    original_text: str
    corrected_text: str
    translated_text: str
    pair: LanguagePair
    model_id: str


__all__ = [
    "RequestContext",
    "LanguagePair",
    "ClassificationResult",
    "TranslationResult",
    "TranslationOutcome",
]
