"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures exception handlers and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request, status
from fastapi.exceptions import ResponseValidationError
from fastapi.responses import JSONResponse

from src.api.models import HealthResponse
from src.api.routes import router as chain_router
from src.api.v0 import router as v0_router
from src.config.settings import get_settings

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "chain",
        "description": "Sequential echo chain and news",
    },
    {
        "name": "v0",
        "description": "Team catalog API v0 - Static J-League team listings",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup and shutdown:
    - Creates the shared HTTP client on startup
    - Closes the HTTP client on shutdown
    """
    settings = get_settings()

    logger.info("Starting application...")
    logger.info("Echo endpoint: %s", settings.echo_url)

    # One pooled client for every outbound echo call
    http_client = httpx.AsyncClient(timeout=httpx.Timeout(settings.echo_timeout_seconds))

    # Store client in app state for dependency injection
    app.state.http_client = http_client

    logger.info("Application startup complete")

    yield

    # Shutdown
    logger.info("Shutting down application...")
    await http_client.aclose()
    logger.info("HTTP client closed")


app = FastAPI(
    title="stepchain",
    description="Sequential echo chain demo - Validated payload sent through three "
    "chained echo calls, plus static news and team endpoints",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

app.include_router(chain_router)
app.include_router(v0_router, prefix="/api/v0")


@app.exception_handler(ResponseValidationError)
async def response_serialization_error(
    request: Request, exc: ResponseValidationError
) -> JSONResponse:
    """Report a response that could not be rendered as JSON as a server error."""
    logger.error("Response serialization failed for %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Response serialization failed"},
    )


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Health check endpoint.

    Returns 200 OK while the application is serving requests.
    """
    return HealthResponse(status="healthy")
