"""
Static catalog - hand-coded news and team data.

The team table is the single source for every team view; league
endpoints are filters over it.
"""

from .models import League, NewsItem, TeamRecord

_NEWS = NewsItem(day="today", content="Shamiko is going to go on date with Momo.")

_TEAMS: tuple[TeamRecord, ...] = (
    TeamRecord(abbreviation="鹿島", region="茨城県", join_year=1991, league=League.J1),
    TeamRecord(abbreviation="浦和", region="埼玉県", join_year=1991, league=League.J1),
    TeamRecord(abbreviation="水戸", region="茨城県", join_year=2000, league=League.J2),
)


def get_news() -> NewsItem:
    """Return today's news item."""
    return _NEWS


def all_teams() -> list[TeamRecord]:
    """Return every team in table order."""
    return list(_TEAMS)


def teams_in_league(league: League) -> list[TeamRecord]:
    """Return the teams of one league, preserving table order."""
    return [team for team in _TEAMS if team.league == league]
