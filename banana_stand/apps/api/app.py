"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from banana_stand import BANANA_STAND_VERSION
from banana_stand.apps.api.middleware import CorrelationIdMiddleware
from banana_stand.core.logging import get_logger
from banana_stand.services import ServiceContainer

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log startup and shutdown; the skill holds no resources between requests."""
    services = getattr(app.state, "services", None)
    handler_count = 0
    if isinstance(services, ServiceContainer) and services.dispatcher is not None:
        handler_count = len(services.dispatcher.request_handlers())
    logger.info(
        "Banana Stand %s starting with %d request handlers.", BANANA_STAND_VERSION, handler_count
    )
    try:
        yield
    finally:
        logger.info("Banana Stand shutting down.")


def create_app(services: ServiceContainer | None = None) -> FastAPI:
    """Build the FastAPI application with configured routers."""
    if services is None:
        raise RuntimeError("Service container must be provided when creating the app.")
    app = FastAPI(lifespan=lifespan, title="Banana Stand", version=BANANA_STAND_VERSION)
    app.state.services = services
    app.add_middleware(CorrelationIdMiddleware)

    # Import lazily to avoid potential circular imports when routers grow.
    from .routes import health, skill  # pylint: disable=import-outside-toplevel

    app.include_router(health.router)
    app.include_router(skill.router)
    return app


__all__ = ["create_app", "lifespan"]
