"""Language codes and the registry of supported translation pairs."""

from __future__ import annotations

import re
from typing import Iterable, Mapping, Optional

from med_translate_engine.core.exceptions import UnsupportedLanguagePairError
from med_translate_engine.core.models import LanguagePair

# Mapping of ISO 639-1 language codes to friendly names.
SUPPORTED_LANGUAGE_MAP = {
    "en": "English",
    "ar": "Arabic",
    "de": "German",
    "es": "Spanish",
    "fr": "French",
    "hi": "Hindi",
    "it": "Italian",
    "ru": "Russian",
    "zh": "Chinese",
}

# Pairs with a published opus-mt model; English is the pivot for every pair.
DEFAULT_LANGUAGE_PAIRS: tuple[tuple[str, str], ...] = tuple(
    pair
    for code in SUPPORTED_LANGUAGE_MAP
    if code != "en"
    for pair in (("en", code), (code, "en"))
)

_LANGUAGE_CODE_PATTERN = re.compile(r"^[a-z]{2,3}$")


def normalize_language_code(value: Optional[str]) -> Optional[str]:
    """Normalize input into a lowercase ISO 639 code, or ``None`` if invalid."""
    if value is None:
        return None
    candidate = str(value).strip().lower()
    if not _LANGUAGE_CODE_PATTERN.match(candidate):
        return None
    return candidate


def friendly_language_name(code: Optional[str], *, fallback: str = "that language") -> str:
    """Return a printable name for the given language code."""
    normalized = normalize_language_code(code)
    if not normalized:
        return fallback
    return SUPPORTED_LANGUAGE_MAP.get(normalized, normalized)


def _parse_pair_key(key: str) -> LanguagePair:
    source, sep, target = key.partition("-")
    src = normalize_language_code(source)
    tgt = normalize_language_code(target)
    if not sep or not src or not tgt:
        raise ValueError(
            f"invalid language pair key {key!r}; expected 'src-tgt' with bare ISO 639 codes "
            "and no region or script subtags"
        )
    return LanguagePair(source=src, target=tgt)


class LanguagePairRegistry:
    """Explicit mapping of supported language pairs to translation model ids."""

    def __init__(self, models: Mapping[LanguagePair, str]) -> None:
        self._models = dict(models)

    @classmethod
    def build(
        cls,
        family: str,
        pairs: Iterable[tuple[str, str]] = DEFAULT_LANGUAGE_PAIRS,
        overrides: Optional[Mapping[str, str]] = None,
    ) -> "LanguagePairRegistry":
        """Create a registry using ``<family>-<src>-<tgt>`` ids plus overrides."""
        family = family.rstrip("-")
        models: dict[LanguagePair, str] = {}
        for source, target in pairs:
            pair = LanguagePair(source=source, target=target)
            models[pair] = f"{family}-{pair.source}-{pair.target}"
        for key, model_id in (overrides or {}).items():
            if not model_id or not model_id.strip():
                raise ValueError(f"empty model id for language pair {key!r}")
            models[_parse_pair_key(key)] = model_id.strip()
        return cls(models)

    def resolve(self, source: str, target: str) -> tuple[LanguagePair, str]:
        """Return the normalized pair and its model id or raise if unsupported."""
        src = normalize_language_code(source)
        tgt = normalize_language_code(target)
        if not src or not tgt:
            raise UnsupportedLanguagePairError(str(source).strip(), str(target).strip())
        pair = LanguagePair(source=src, target=tgt)
        model_id = self._models.get(pair)
        if model_id is None:
            raise UnsupportedLanguagePairError(src, tgt)
        return pair, model_id

    def is_supported(self, source: str, target: str) -> bool:
        """Whether a model is registered for ``source`` -> ``target``."""
        try:
            self.resolve(source, target)
        except UnsupportedLanguagePairError:
            return False
        return True

    def items(self) -> list[tuple[LanguagePair, str]]:
        """Return ``(pair, model_id)`` entries sorted by source then target."""
        return sorted(self._models.items(), key=lambda item: (item[0].source, item[0].target))

    def __len__(self) -> int:
        return len(self._models)


__all__ = [
    "SUPPORTED_LANGUAGE_MAP",
    "DEFAULT_LANGUAGE_PAIRS",
    "LanguagePairRegistry",
    "normalize_language_code",
    "friendly_language_name",
]
