"""whispssh relay FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from whispssh.config import Settings
from whispssh.errors import validation_error_handler
from whispssh.middleware import AccessLogMiddleware
from whispssh.routes import channel_router, health_router
from whispssh.services import ChannelRegistry

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    if settings is None:
        settings = Settings()

    registry = ChannelRegistry(send_timeout=settings.send_timeout)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(f"whispssh relay starting up on {settings.host}:{settings.port}")

        yield

        channel_count = await registry.count()
        logger.info(f"whispssh relay shutting down ({channel_count} channels)")

    relay_app = FastAPI(
        title="whispssh relay",
        description="Password-protected WebSocket broadcast channels",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Store services in app.state for dependency injection
    relay_app.state.registry = registry
    relay_app.state.settings = settings

    relay_app.add_exception_handler(RequestValidationError, validation_error_handler)  # type: ignore[arg-type]
    if settings.access_log:
        relay_app.add_middleware(AccessLogMiddleware)

    relay_app.include_router(channel_router)
    relay_app.include_router(health_router)

    return relay_app
