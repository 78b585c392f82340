"""
Unit tests for domain ports, models and exceptions.

Tests verify:
- Port interfaces are properly defined
- Exceptions are properly structured
- Domain purity (zero framework imports)
"""

import asyncio
import dataclasses
import json
import subprocess
from enum import Enum

import pytest

from src.domain.exceptions import (
    ChainAbandoned,
    ChainError,
    EchoRequestError,
    PayloadValidationError,
)
from src.domain.models import League, Payload
from src.domain.ports import EchoClient


class TestLeagueEnum:
    """Tests for League enum."""

    def test_league_is_str_enum(self) -> None:
        """League uses str mixin for JSON serialization."""
        assert issubclass(League, Enum)
        assert issubclass(League, str)

    def test_league_values(self) -> None:
        """League values match the route segments."""
        assert League.J1 == "j1"
        assert League.J2 == "j2"
        assert json.dumps(League.J1) == '"j1"'


class TestPayloadModel:
    def test_payload_is_immutable(self) -> None:
        """Payload is a frozen dataclass."""
        payload = Payload(id="abc", name="x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            payload.id = "other"  # type: ignore[misc]

    def test_payload_equality_is_structural(self) -> None:
        assert Payload(id="abc", name="x") == Payload(id="abc", name="x")


class TestEchoClientProtocol:
    """Tests for EchoClient protocol."""

    def test_echo_client_has_post_and_echo_method(self) -> None:
        """EchoClient defines post_and_echo method."""
        assert hasattr(EchoClient, "post_and_echo")

    def test_structural_implementation(self) -> None:
        """Any class with an async post_and_echo satisfies the port."""

        class LoopbackEcho:
            async def post_and_echo(self, payload: Payload) -> Payload:
                return payload

        def accepts_echo_client(client: EchoClient) -> EchoClient:
            return client

        client = accepts_echo_client(LoopbackEcho())
        result = asyncio.run(client.post_and_echo(Payload(id="abc", name="x")))
        assert result == Payload(id="abc", name="x")


class TestDomainExceptions:
    """Tests for domain exceptions."""

    @pytest.mark.parametrize("exc_type", [PayloadValidationError, EchoRequestError, ChainAbandoned])
    def test_inherits_chain_error(self, exc_type: type) -> None:
        """All chain failures share the ChainError base."""
        assert issubclass(exc_type, ChainError)
        assert issubclass(ChainError, Exception)

    def test_payload_validation_error_carries_field(self) -> None:
        """PayloadValidationError exposes the offending field and message."""
        exc = PayloadValidationError("name", "name too long")
        assert exc.field == "name"
        assert exc.message == "name too long"
        assert str(exc) == "name too long"

    def test_echo_request_error_can_be_raised(self) -> None:
        """EchoRequestError can be raised and caught."""
        with pytest.raises(EchoRequestError):
            raise EchoRequestError("Echo service returned status 500")


class TestDomainPurity:
    """Tests for domain purity - zero framework imports."""

    @pytest.mark.parametrize(
        "pattern",
        [
            "from fastapi",
            "import fastapi",
            "from pydantic",
            "import pydantic",
            "from httpx",
            "import httpx",
        ],
    )
    def test_no_framework_imports_in_domain(self, pattern: str) -> None:
        """Domain layer imports no web, validation or HTTP client framework."""
        result = subprocess.run(
            ["grep", "-r", pattern, "src/domain/"],
            capture_output=True,
            text=True,
        )
        assert result.returncode != 0, f"Framework import found: {result.stdout}"
