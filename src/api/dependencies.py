"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

import httpx
from fastapi import Depends, Request

from src.adapters.echo.httpbin import HttpBinEchoClient
from src.config.settings import Settings, get_settings
from src.domain.chain import StepChainService


def get_http_client(request: Request) -> httpx.AsyncClient:
    """
    Get shared HTTP client from app state.

    The client is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.http_client


def get_echo_client(
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
) -> HttpBinEchoClient:
    """Create echo adapter bound to the shared HTTP client."""
    return HttpBinEchoClient(
        client,
        settings.echo_url,
        retry_malformed=settings.retry_malformed_echo,
    )


def get_chain_service(
    echo_client: HttpBinEchoClient = Depends(get_echo_client),
    settings: Settings = Depends(get_settings),
) -> StepChainService:
    """
    Create step chain service with injected dependencies.

    Wires the echo adapter into the domain service.
    """
    return StepChainService(echo_client=echo_client, steps=settings.chain_steps)
