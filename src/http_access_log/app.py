from __future__ import annotations

import logging
from typing import IO

from fastapi import FastAPI

from http_access_log.api.middleware.access_log import AccessLogMiddleware
from http_access_log.api.v1.routers import demo, health
from http_access_log.application.ports.clock import Clock
from http_access_log.config import settings
from http_access_log.infrastructure.sink.stream import default_logger, file_logger

logger = logging.getLogger(__name__)


def _configured_sink() -> logging.Logger:
    if settings.ACCESS_LOG_FILE:
        logger.info("Access log appending to %s", settings.ACCESS_LOG_FILE)
        return file_logger(settings.ACCESS_LOG_FILE, settings.ACCESS_LOG_LOGGER)
    return default_logger(settings.ACCESS_LOG_LOGGER)


def create_app(
    output: logging.Logger | IO[str] | None = None,
    clock: Clock | None = None,
) -> FastAPI:
    app = FastAPI(
        title="HTTP Access Log Demo",
        version="0.1.0",
    )

    app.add_middleware(
        AccessLogMiddleware,
        output=output if output is not None else _configured_sink(),
        clock=clock,
    )

    app.include_router(health.router)
    app.include_router(demo.router)

    return app
