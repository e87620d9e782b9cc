"""FastAPI application with lifespan and router mounting."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from strcalc.api.routes import calculate, health
from strcalc.calculator import create_calculator
from strcalc.core.config import AppSettings
from strcalc.core.exceptions import DelimiterFormatError, NegativeNumbersError
from strcalc.models.api import ErrorResponse

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Initialize and tear down application resources."""
    settings: AppSettings = app.state.settings
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    app.state.calculator = create_calculator(settings)
    logger.info(
        "strcalc API started (environment=%s, cache=%s)",
        settings.environment, settings.cache.backend,
    )
    yield


async def _format_error_handler(request: Request, exc: DelimiterFormatError) -> JSONResponse:
    body = ErrorResponse(error="format_error", detail=str(exc))
    return JSONResponse(status_code=400, content=body.model_dump())


async def _validation_error_handler(request: Request, exc: NegativeNumbersError) -> JSONResponse:
    body = ErrorResponse(error="validation_error", detail=str(exc))
    return JSONResponse(status_code=400, content=body.model_dump())


def create_app(settings: AppSettings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="strcalc String Calculator",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings if settings is not None else AppSettings()
    app.add_exception_handler(DelimiterFormatError, _format_error_handler)
    app.add_exception_handler(NegativeNumbersError, _validation_error_handler)
    app.include_router(health.router)
    app.include_router(calculate.router)
    return app
