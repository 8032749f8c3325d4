"""Unit tests for API dependency helpers."""
# pylint: disable=missing-function-docstring

import pytest
from fastapi import HTTPException

from med_translate_engine.apps.api import dependencies
from med_translate_engine.services import ServiceContainer, build_default_services, runtime


def test_get_service_container_unconfigured():
    runtime.clear_services()
    with pytest.raises(HTTPException) as excinfo:
        dependencies.get_service_container()
    assert excinfo.value.status_code == 500


def test_get_translation_pipeline_requires_ports():
    with pytest.raises(HTTPException) as excinfo:
        dependencies.get_translation_pipeline(ServiceContainer())
    assert excinfo.value.detail == "Translation pipeline is unavailable"


def test_get_translation_pipeline_returns_wired_pipeline(classifier, translator):
    container = build_default_services(classifier_port=classifier, translator_port=translator)
    assert dependencies.get_translation_pipeline(container) is container.pipeline


def test_get_language_pairs():
    container = build_default_services()
    assert container.pipeline is None
    registry = dependencies.get_language_pairs(container)
    assert registry.is_supported("en", "fr")
    with pytest.raises(HTTPException):
        dependencies.get_language_pairs(ServiceContainer())
