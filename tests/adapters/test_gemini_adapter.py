"""Tests for the Gemini classifier adapter."""
# pylint: disable=missing-function-docstring

from __future__ import annotations

import asyncio
import json
import logging

import httpx
import pytest

from med_translate_engine.adapters.gemini import (
    GeminiClassifierAdapter,
    build_classification_payload,
    parse_classification_response,
)
from med_translate_engine.core.exceptions import (
    ClassificationServiceError,
    ClassificationTimeoutError,
    MissingConfigurationError,
)


def _candidate_body(verdict: dict | str) -> dict:
    text = verdict if isinstance(verdict, str) else json.dumps(verdict)
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


def _adapter(handler, **kwargs) -> GeminiClassifierAdapter:
    return GeminiClassifierAdapter(
        api_key=kwargs.pop("api_key", "gem-key"),
        model="gemini-test",
        base_url="https://gemini.example/v1beta",
        timeout=5.0,
        transport=httpx.MockTransport(handler),
        **kwargs,
    )


def test_payload_requests_structured_verdict():
    payload = build_classification_payload("I have a headach")
    prompt = payload["contents"][0]["parts"][0]["text"]
    assert '"I have a headach"' in prompt
    config = payload["generationConfig"]
    assert config["responseMimeType"] == "application/json"
    schema = config["responseSchema"]
    assert schema["properties"] == {
        "is_convo": {"type": "BOOLEAN"},
        "reason": {"type": "STRING"},
        "corrected_text": {"type": "STRING"},
    }
    assert schema["propertyOrdering"] == ["is_convo", "reason", "corrected_text"]


def test_classify_posts_to_generate_content():
    seen: dict = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = request.url
        seen["api_key"] = request.headers["x-goog-api-key"]
        seen["body"] = json.loads(request.content)
        return httpx.Response(
            200,
            json=_candidate_body(
                {"is_convo": True, "reason": "symptoms", "corrected_text": "I have a headache"}
            ),
        )

    result = asyncio.run(_adapter(handler).classify("I have a headach"))

    assert seen["url"].path == "/v1beta/models/gemini-test:generateContent"
    assert seen["api_key"] == "gem-key"
    assert "key" not in seen["url"].params
    assert "I have a headach" in seen["body"]["contents"][0]["parts"][0]["text"]
    assert result.is_conversation is True
    assert result.reason == "symptoms"
    assert result.corrected_text == "I have a headache"


def test_classify_rejection_keeps_reason():
    def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200, json=_candidate_body({"is_convo": False, "reason": "not health-related"})
        )

    result = asyncio.run(_adapter(handler).classify("buy milk and bread"))

    assert result.is_conversation is False
    assert result.reason == "not health-related"
    assert result.corrected_text == "buy milk and bread"


def test_missing_api_key_fails_fast():
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json={})

    with pytest.raises(MissingConfigurationError, match="GEMINI_API_KEY"):
        asyncio.run(_adapter(handler, api_key="").classify("cough"))
    assert calls == []


def test_http_error_status_raises_with_service_message():
    def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(403, json={"error": {"code": 403, "message": "API key invalid"}})

    with pytest.raises(ClassificationServiceError, match="API key invalid"):
        asyncio.run(_adapter(handler).classify("cough"))


def test_timeout_raises_timeout_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("slow", request=request)

    with pytest.raises(ClassificationTimeoutError):
        asyncio.run(_adapter(handler).classify("cough"))


def test_network_error_raises_service_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(ClassificationServiceError) as excinfo:
        asyncio.run(_adapter(handler).classify("cough"))
    assert not isinstance(excinfo.value, ClassificationTimeoutError)


@pytest.mark.parametrize(
    "body",
    [
        {},
        {"candidates": []},
        {"candidates": [{"content": {"parts": []}}]},
        {"candidates": [{"finishReason": "SAFETY"}]},
        _candidate_body("not json at all"),
        _candidate_body("[true]"),
        ["unexpected"],
    ],
)
def test_malformed_responses_raise(body):
    with pytest.raises(ClassificationServiceError):
        parse_classification_response(body, "cough")


def test_non_json_http_body_raises():
    def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>oops</html>")

    with pytest.raises(ClassificationServiceError):
        asyncio.run(_adapter(handler).classify("cough"))


def test_absent_is_convo_counts_as_approval():
    result = parse_classification_response(_candidate_body({"reason": "unsure"}), "cough")
    assert result.is_conversation is True
    assert result.corrected_text == "cough"


@pytest.mark.parametrize("status", [200, 403])
def test_api_key_never_logged(caplog: pytest.LogCaptureFixture, status: int):
    secret = "gem-secret-4242"

    def handler(_: httpx.Request) -> httpx.Response:
        if status != 200:
            return httpx.Response(status, json={"error": {"message": "API key invalid"}})
        return httpx.Response(200, json=_candidate_body({"is_convo": True}))

    caplog.set_level(logging.DEBUG)
    try:
        asyncio.run(_adapter(handler, api_key=secret).classify("I have a cough"))
    except ClassificationServiceError:
        assert status != 200

    assert caplog.records
    for record in caplog.records:
        assert secret not in record.getMessage()
