"""
Domain models - Plain data structures exchanged by the service.

All models are immutable and live for a single request/response cycle.
"""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Payload:
    """The id/name record sent to and returned by the echo service."""

    id: str
    name: str


@dataclass(frozen=True)
class NewsItem:
    """A single news entry."""

    day: str
    content: str


class League(str, Enum):
    """League partition key for team records."""

    J1 = "j1"
    J2 = "j2"


@dataclass(frozen=True)
class TeamRecord:
    """A football team and the league it plays in."""

    abbreviation: str
    region: str
    join_year: int
    league: League
