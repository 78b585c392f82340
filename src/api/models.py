"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
"""

from pydantic import BaseModel, Field

from src.domain.models import NewsItem, Payload, TeamRecord


class PayloadBody(BaseModel):
    """
    Request and response model for the chained payload.

    Length bounds are enforced by the domain validator so that violations
    surface as 400 rather than 422.
    """

    id: str = Field(..., description="Identifier (1 to 1,000,000 characters)")
    name: str = Field(..., description="Display name (1 to 100 characters)")

    def to_domain(self) -> Payload:
        return Payload(id=self.id, name=self.name)

    @classmethod
    def from_domain(cls, payload: Payload) -> "PayloadBody":
        return cls(id=payload.id, name=payload.name)


class NewsResponse(BaseModel):
    """Response model for the news endpoint."""

    day: str
    content: str

    @classmethod
    def from_domain(cls, news: NewsItem) -> "NewsResponse":
        return cls(day=news.day, content=news.content)


class TeamResponse(BaseModel):
    """Response model for a single team record."""

    team_abbreviation: str
    active_area: str
    join_year: int = Field(..., ge=0)

    @classmethod
    def from_domain(cls, team: TeamRecord) -> "TeamResponse":
        return cls(
            team_abbreviation=team.abbreviation,
            active_area=team.region,
            join_year=team.join_year,
        )


class HealthResponse(BaseModel):
    """Response model for the health check."""

    status: str


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str
