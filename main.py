"""ASGI entrypoint: ``uvicorn main:app``."""

from med_translate_engine.api_factory import create_app

app = create_app()
