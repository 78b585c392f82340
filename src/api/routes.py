"""
API routes - Step chain and news endpoints.

This module defines the HTTP endpoints:
- POST /something - Run the validate/echo chain on a payload
- GET /shami_momo - Today's news
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status

from src.api.dependencies import get_chain_service
from src.api.models import ErrorResponse, NewsResponse, PayloadBody
from src.domain.catalog import get_news
from src.domain.chain import StepChainService
from src.domain.exceptions import ChainAbandoned, EchoRequestError, PayloadValidationError

logger = logging.getLogger(__name__)

# Non-standard status for a caller that disconnected mid-request
CLIENT_CLOSED_REQUEST = 499

router = APIRouter(tags=["chain"])


@router.post(
    "/something",
    response_model=PayloadBody,
    responses={
        400: {"model": ErrorResponse, "description": "Payload field out of bounds"},
        422: {"description": "Malformed request body"},
        502: {"model": ErrorResponse, "description": "Echo service request failed"},
    },
    summary="Run the echo chain",
    description="Validate the payload and send it through three sequential "
    "echo calls, returning the payload produced by the last call.",
)
async def create_something(
    request_data: PayloadBody,
    request: Request,
    service: StepChainService = Depends(get_chain_service),
) -> PayloadBody:
    """
    Chain the payload through the echo service.

    - **id**: 1 to 1,000,000 characters
    - **name**: 1 to 100 characters
    """
    try:
        result = await service.run(
            request_data.to_domain(), is_abandoned=request.is_disconnected
        )
    except PayloadValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=exc.message,
        ) from None
    except EchoRequestError as exc:
        logger.error("Echo chain failed: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Echo service request failed",
        ) from None
    except ChainAbandoned as exc:
        logger.info("Client disconnected, %s", exc)
        raise HTTPException(
            status_code=CLIENT_CLOSED_REQUEST,
            detail="Client closed request",
        ) from None
    return PayloadBody.from_domain(result)


@router.get(
    "/shami_momo",
    response_model=NewsResponse,
    summary="Today's news",
)
async def todays_shami_momo() -> NewsResponse:
    """Return the fixed news item for today."""
    return NewsResponse.from_domain(get_news())
