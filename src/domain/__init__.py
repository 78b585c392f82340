"""
Domain layer - Pure business logic with zero framework imports.

This package contains the step chain, payload validation and the static
catalog. It defines its own port interfaces for infrastructure
abstraction, keeping the HTTP transport out of the domain.
"""

from .catalog import all_teams, get_news, teams_in_league
from .chain import StepChainService
from .exceptions import ChainAbandoned, ChainError, EchoRequestError, PayloadValidationError
from .models import League, NewsItem, Payload, TeamRecord
from .ports import EchoClient
from .validation import validate_payload

__all__ = [
    "ChainAbandoned",
    "ChainError",
    "EchoClient",
    "EchoRequestError",
    "League",
    "NewsItem",
    "Payload",
    "PayloadValidationError",
    "StepChainService",
    "TeamRecord",
    "all_teams",
    "get_news",
    "teams_in_league",
    "validate_payload",
]
