"""
Domain exceptions - Semantic error types for the step chain.

This module defines domain-specific exceptions that communicate
chain failures without leaking infrastructure details.
"""


class ChainError(Exception):
    """Base class for step chain domain errors."""

    pass


class PayloadValidationError(ChainError):
    """Payload field violates its length bounds."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


class EchoRequestError(ChainError):
    """Echo call failed at the transport level or returned an unparsable body."""

    pass


class ChainAbandoned(ChainError):
    """Caller went away before the chain finished; remaining steps skipped."""

    pass
