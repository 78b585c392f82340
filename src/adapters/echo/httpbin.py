"""
httpbin echo adapter - Implements EchoClient protocol.

This module provides the httpx implementation of the domain's echo
port. The payload is POSTed as JSON to an httpbin-style endpoint, which
answers with an envelope describing the request; the echoed payload is
read back from the envelope's ``json`` field.

The ``httpx.AsyncClient`` is injected and shared across requests so the
connection pool outlives any single call. Response bodies are read in
full before parsing.
"""

import logging

import httpx
from pydantic import BaseModel, Field, ValidationError

from src.domain.exceptions import EchoRequestError
from src.domain.models import Payload

logger = logging.getLogger(__name__)


class EchoedPayload(BaseModel):
    """Payload as it appears inside the echo envelope."""

    id: str
    name: str


class EchoEnvelope(BaseModel):
    """
    Response envelope returned by httpbin's /post endpoint.

    Only ``json`` is consumed; the request metadata is accepted and dropped.
    """

    args: dict[str, str] = Field(default_factory=dict)
    data: str = ""
    files: dict[str, str] = Field(default_factory=dict)
    form: dict[str, str] = Field(default_factory=dict)
    headers: dict[str, str] = Field(default_factory=dict)
    payload: EchoedPayload = Field(alias="json")
    origin: str = ""
    url: str = ""


class HttpBinEchoClient:
    """
    Implements EchoClient protocol via httpx.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Transport failures are terminal. Malformed bodies are terminal unless
    ``retry_malformed`` is set, in which case the call is repeated once.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        url: str,
        retry_malformed: bool = False,
    ) -> None:
        """
        Initialize adapter with a shared HTTP client.

        Args:
            client: Long-lived httpx.AsyncClient owned by the application
            url: Echo endpoint receiving the POST
            retry_malformed: Repeat the call once when the body is unparsable
        """
        self._client = client
        self._url = url
        self._retry_malformed = retry_malformed

    async def post_and_echo(self, payload: Payload) -> Payload:
        """
        POST payload as JSON and return the payload echoed in the response.

        Args:
            payload: Payload to send

        Returns:
            Payload extracted from the envelope's ``json`` field

        Raises:
            EchoRequestError: On connection failure, timeout, non-2xx status
                or a body that does not match the envelope shape
        """
        body = await self._post(payload)
        try:
            return self._parse(body)
        except EchoRequestError:
            if not self._retry_malformed:
                raise
            logger.warning("Retrying echo call once after malformed response")
        return self._parse(await self._post(payload))

    async def _post(self, payload: Payload) -> bytes:
        logger.debug("POST %s (id length %d)", self._url, len(payload.id))
        try:
            response = await self._client.post(
                self._url,
                json={"id": payload.id, "name": payload.name},
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.warning("Echo service returned %d", exc.response.status_code)
            raise EchoRequestError(
                f"Echo service returned status {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            logger.warning("Echo request to %s failed: %r", self._url, exc)
            raise EchoRequestError(f"Echo request failed: {type(exc).__name__}") from exc
        return response.content

    def _parse(self, body: bytes) -> Payload:
        try:
            envelope = EchoEnvelope.model_validate_json(body)
        except ValidationError as exc:
            logger.warning(
                "Malformed echo response from %s (%d errors)", self._url, exc.error_count()
            )
            raise EchoRequestError("Echo response is not a valid envelope") from exc
        return Payload(id=envelope.payload.id, name=envelope.payload.name)
