"""Tests for core data models."""

from med_translate_engine.core.models import ClassificationResult, LanguagePair

# pylint: disable=missing-function-docstring


def test_classification_from_payload_accepts_explicit_true():
    result = ClassificationResult.from_payload(
        {"is_convo": True, "reason": " symptoms ", "corrected_text": "I have a headache"},
        "I have a headach",
    )
    assert result.is_conversation is True
    assert result.reason == "symptoms"
    assert result.corrected_text == "I have a headache"


def test_classification_only_explicit_false_rejects():
    assert ClassificationResult.from_payload({"is_convo": False}, "x").is_conversation is False
    assert ClassificationResult.from_payload({}, "x").is_conversation is True
    assert ClassificationResult.from_payload({"is_convo": None}, "x").is_conversation is True


def test_classification_corrected_text_falls_back_to_original():
    for payload in ({}, {"corrected_text": ""}, {"corrected_text": "  "}, {"corrected_text": 42}):
        result = ClassificationResult.from_payload(payload, "original")
        assert result.corrected_text == "original"


def test_classification_non_string_reason_is_blank():
    assert ClassificationResult.from_payload({"reason": ["a"]}, "x").reason == ""


def test_language_pair_key():
    pair = LanguagePair(source="en", target="fr")
    assert pair.key == "en-fr"
    assert str(pair) == "en-fr"
    assert pair == LanguagePair("en", "fr")
    assert hash(pair) == hash(LanguagePair("en", "fr"))
