"""Pydantic models for request/response validation."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class PinnedRepo(BaseModel):
    """A repository featured on a user's GitHub profile."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    owner: str
    repo: str
    link: str
    description: str | None = None
    image: str
    website: str | None = None
    language: str | None = None
    language_color: str | None = None
    stars: int = Field(default=0, ge=0)
    forks: int = Field(default=0, ge=0)


class ErrorResponse(BaseModel):
    """Error envelope returned when the profile cannot be scraped."""

    error: str
    details: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "healthy"
    version: str = "1.0.0"
    github_reachable: bool = True
    cache_size: int = 0
    cache_max_size: int = 500
    pending_refreshes: int = 0
