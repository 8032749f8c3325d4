"""Core exception types shared across layers."""


class MedTranslateError(Exception):
    """Base class for errors surfaced by the translation pipeline."""


class InvalidRequestError(MedTranslateError):
    """Raised when an inbound request fails boundary validation."""


class UnsupportedLanguagePairError(InvalidRequestError):
    """Raised when no translation model is registered for a language pair."""

    def __init__(self, source: str, target: str) -> None:
        super().__init__(f"Unsupported language pair: {source} -> {target}")
        self.source = source
        self.target = target


class MissingConfigurationError(MedTranslateError):
    """Raised when a required setting (usually an API key) is absent."""

    def __init__(self, setting_name: str, purpose: str) -> None:
        super().__init__(f"{setting_name} is not configured; it is required for {purpose}.")
        self.setting_name = setting_name


class ClassificationServiceError(MedTranslateError):
    """Raised when the content classifier cannot produce a usable verdict."""


class ClassificationTimeoutError(ClassificationServiceError):
    """Raised when the content classifier does not answer in time."""


class ContentRejectedError(MedTranslateError):
    """Raised when the text is not a medical or doctor-patient conversation."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class TranslationServiceError(MedTranslateError):
    """Raised when the translation service fails or answers malformed data."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class TranslationTimeoutError(TranslationServiceError):
    """Raised when the translation service does not answer in time."""


__all__ = [
    "MedTranslateError",
    "InvalidRequestError",
    "UnsupportedLanguagePairError",
    "MissingConfigurationError",
    "ClassificationServiceError",
    "ClassificationTimeoutError",
    "ContentRejectedError",
    "TranslationServiceError",
    "TranslationTimeoutError",
]
