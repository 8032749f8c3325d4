"""Infrastructure adapter exports."""

from .gemini import GeminiClassifierAdapter
from .huggingface import HuggingFaceTranslatorAdapter

__all__ = [
    "GeminiClassifierAdapter",
    "HuggingFaceTranslatorAdapter",
]
