"""
Step chain domain service - sequential validate/echo pipeline.

Each step validates its input, sends it to the echo service and hands the
echoed payload to the next step:

    initial -> [validate, echo] -> p1 -> [validate, echo] -> p2 -> [validate, echo] -> p3

Steps never overlap. The first failure ends the chain and no partial
result is returned. The echo service is stateless, so nothing is rolled back.
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from .exceptions import ChainAbandoned
from .models import Payload
from .ports import EchoClient
from .validation import validate_payload

DEFAULT_STEPS = 3


@dataclass
class StepChainService:
    """
    Domain service running the validate-then-echo chain.

    Orchestrates the chain steps; transport concerns live in the
    injected echo client.
    """

    echo_client: EchoClient
    steps: int = DEFAULT_STEPS

    async def run(
        self,
        initial: Payload,
        is_abandoned: Callable[[], Awaitable[bool]] | None = None,
    ) -> Payload:
        """
        Run the chain starting from the inbound payload.

        Args:
            initial: Payload received from the caller
            is_abandoned: Checked before every step after the first;
                returning True stops the chain

        Returns:
            Payload produced by the last step

        Raises:
            PayloadValidationError: If a step input fails validation
            EchoRequestError: If an echo call fails
            ChainAbandoned: If is_abandoned reported True
        """
        payload = initial
        for step in range(self.steps):
            if step and is_abandoned is not None and await is_abandoned():
                raise ChainAbandoned(f"Abandoned before step {step + 1} of {self.steps}")
            payload = await self._step(payload)
        return payload

    async def _step(self, payload: Payload) -> Payload:
        validate_payload(payload)
        return await self.echo_client.post_and_echo(payload)
