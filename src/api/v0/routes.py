"""
API v0 routes.

Read-only views over the team table.
"""

from fastapi import APIRouter

from src.api.models import TeamResponse
from src.domain.catalog import all_teams, teams_in_league
from src.domain.models import League

router = APIRouter(tags=["v0"])


@router.get(
    "/teams",
    response_model=list[TeamResponse],
    summary="List all teams",
)
async def list_teams() -> list[TeamResponse]:
    """Return every team, J1 first then J2."""
    return [TeamResponse.from_domain(team) for team in all_teams()]


@router.get(
    "/teams/j1",
    response_model=list[TeamResponse],
    summary="List J1 teams",
)
async def list_j1_teams() -> list[TeamResponse]:
    return [TeamResponse.from_domain(team) for team in teams_in_league(League.J1)]


@router.get(
    "/teams/j2",
    response_model=list[TeamResponse],
    summary="List J2 teams",
)
async def list_j2_teams() -> list[TeamResponse]:
    return [TeamResponse.from_domain(team) for team in teams_in_league(League.J2)]
