"""
Payload validation - Length bounds checked before any echo call.
"""

from .exceptions import PayloadValidationError
from .models import Payload

ID_MIN_LENGTH = 1
ID_MAX_LENGTH = 1_000_000
NAME_MIN_LENGTH = 1
NAME_MAX_LENGTH = 100


def validate_payload(payload: Payload) -> None:
    """
    Check payload field lengths.

    Args:
        payload: Payload to check

    Raises:
        PayloadValidationError: If id is outside [1, 1_000_000] characters
            or name is outside [1, 100] characters
    """
    _check_length("id", payload.id, ID_MIN_LENGTH, ID_MAX_LENGTH)
    _check_length("name", payload.name, NAME_MIN_LENGTH, NAME_MAX_LENGTH)


def _check_length(field: str, value: str, min_length: int, max_length: int) -> None:
    if not min_length <= len(value) <= max_length:
        raise PayloadValidationError(
            field,
            f"{field} must be between {min_length} and {max_length} characters, "
            f"got {len(value)}",
        )
