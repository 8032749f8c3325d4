"""API request/response models for the translation endpoint."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TranslateRequest(BaseModel):
    """Request model for POST /api/translate."""

    model_config = ConfigDict(str_strip_whitespace=True, populate_by_name=True)

    text: str = Field(..., min_length=1, description="Raw text to check and translate")
    source_lang: str = Field(
        ..., alias="sourceLang", min_length=1, description="Source language code (e.g. 'en')"
    )
    target_lang: str = Field(
        ..., alias="targetLang", min_length=1, description="Target language code (e.g. 'fr')"
    )


class TranslateResponse(BaseModel):
    """Response model for a successful POST /api/translate."""

    model_config = ConfigDict(populate_by_name=True)

    translated_text: str = Field(..., alias="translatedText")
    corrected_text: str | None = Field(default=None, alias="correctedText")


class ErrorResponse(BaseModel):
    """Body returned with every non-2xx response."""

    error: str


class LanguagePairInfo(BaseModel):
    """A supported language pair and the model that serves it."""

    source: str
    target: str
    model: str


class LanguagePairsResponse(BaseModel):
    """Response model for GET /api/languages."""

    pairs: list[LanguagePairInfo] = Field(default_factory=list)


__all__ = [
    "TranslateRequest",
    "TranslateResponse",
    "ErrorResponse",
    "LanguagePairInfo",
    "LanguagePairsResponse",
]
