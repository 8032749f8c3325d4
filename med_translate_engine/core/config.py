"""Application configuration loaded via Pydantic settings."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed configuration sourced from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Classification service (Gemini generateContent)
    GEMINI_API_KEY: str | None = Field(default=None)
    GEMINI_MODEL: str = Field(default="gemini-2.5-flash-preview-05-20")
    GEMINI_BASE_URL: str = Field(default="https://generativelanguage.googleapis.com/v1beta")
    CLASSIFICATION_TIMEOUT_SECONDS: float = Field(default=15.0, gt=0)
    CLASSIFICATION_FAILURE_POLICY: Literal["fail_closed", "fail_open"] = Field(
        default="fail_closed"
    )

    # Translation service (Hugging Face Inference API)
    HF_API_KEY: str | None = Field(default=None)
    HF_INFERENCE_BASE_URL: str = Field(default="https://api-inference.huggingface.co")
    TRANSLATION_MODEL_FAMILY: str = Field(default="Helsinki-NLP/opus-mt")
    TRANSLATION_MODEL_OVERRIDES: dict[str, str] = Field(
        default_factory=dict,
        description=(
            "Extra or replacement models keyed by 'src-tgt'. Both sides must be bare ISO "
            "639 codes (e.g. 'en-sw'); region or script subtags such as "
            "'pt-BR' or 'zh_cn' are rejected."
        ),
    )
    TRANSLATION_TIMEOUT_SECONDS: float = Field(default=30.0, gt=0)

    # Request handling
    MAX_TEXT_LENGTH: int = Field(default=5000, ge=1)
    INCLUDE_CORRECTED_TEXT: bool = Field(default=False)

    MED_TRANSLATE_LOG_LEVEL: str = Field(default="info")
    MED_TRANSLATE_LOG_DIR: Path | None = Field(default=None)
    DATA_DIR: Path = Field(default=Path("/data"))


settings = Settings()
config = settings  # Alias used by request-time lookups


__all__ = ["Settings", "settings", "config"]
