"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from med_translate_engine.apps.api.errors import register_exception_handlers
from med_translate_engine.apps.api.middleware import CorrelationIdMiddleware
from med_translate_engine.core.config import config
from med_translate_engine.core.logging import get_logger
from med_translate_engine.services import ServiceContainer
from med_translate_engine.services import runtime

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Register the service container at startup and report what is configured."""
    logger.info("Initializing med translate engine...")
    services = getattr(app.state, "services", None)
    if isinstance(services, ServiceContainer):
        runtime.set_services(services)
        pair_count = len(services.language_pairs) if services.language_pairs else 0
        logger.info("%d language pairs registered.", pair_count)
    if not config.GEMINI_API_KEY:
        logger.warning("GEMINI_API_KEY is not set; translate requests will fail.")
    if not config.HF_API_KEY:
        logger.warning("HF_API_KEY is not set; translate requests will fail.")
    logger.info(
        "Classification failure policy: %s", config.CLASSIFICATION_FAILURE_POLICY
    )
    yield
    logger.info("Med translate engine shut down.")


def create_app(services: ServiceContainer | None = None) -> FastAPI:
    """Build the FastAPI application with configured routers."""
    if services is None:
        raise RuntimeError("Service container must be provided when creating the app.")
    app = FastAPI(title="Med Translate", lifespan=lifespan)
    app.state.services = services
    runtime.set_services(services)
    app.add_middleware(CorrelationIdMiddleware)
    register_exception_handlers(app)

    # Import lazily to avoid potential circular imports when routers grow.
    from .routes import health, translate  # pylint: disable=import-outside-toplevel

    app.include_router(health.router)
    app.include_router(translate.router)
    return app


__all__ = ["create_app", "lifespan"]
