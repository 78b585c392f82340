"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from typing import Protocol

from .models import Payload


class EchoClient(Protocol):
    """Port interface for the remote echo service."""

    async def post_and_echo(self, payload: Payload) -> Payload:
        """
        Send payload to the echo service and return the payload it echoed back.

        Args:
            payload: Payload to send (already validated by the caller)

        Returns:
            Payload parsed from the echo response

        Raises:
            EchoRequestError: If the call fails or the response is unparsable
        """
        ...
