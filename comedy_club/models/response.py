"""
API response models.

Sandi Metz Principles:
- Small classes with clear purpose
- Immutable response data
- Clear naming conventions
"""

from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field

from comedy_club.models.joke import Joke


class RandomJokeResponse(BaseModel):
    """Payload returned when a random joke is served."""

    id: str = Field(..., description="Joke identifier")
    setup: str = Field(..., description="Joke setup")
    punchline: str = Field(..., description="Joke punchline")
    times_displayed: int = Field(..., ge=1, description="Display count after this serve")

    @classmethod
    def from_joke(cls, joke: Joke, times_displayed: int) -> "RandomJokeResponse":
        """Create response from a sampled joke and its new count."""
        return cls(
            id=joke.id,
            setup=joke.setup,
            punchline=joke.punchline,
            times_displayed=times_displayed,
        )


class StatsResponse(BaseModel):
    """Aggregate display statistics."""

    model_config = ConfigDict(populate_by_name=True)

    total_jokes: int = Field(..., ge=0, alias="totalJokes", description="Stored jokes")
    total_displays: int = Field(
        ..., ge=0, alias="totalDisplays", description="Sum of display counts"
    )
    top_jokes: List[Joke] = Field(
        default_factory=list, alias="topJokes", description="Most displayed jokes"
    )


class HealthResponse(BaseModel):
    """Health check response."""

    status: Literal["healthy"] = Field(default="healthy", description="Service status")
    mongodb: Literal["connected"] = Field(
        default="connected", description="Store status"
    )
    redis: Literal["connected"] = Field(default="connected", description="Cache status")


class ServiceInfo(BaseModel):
    """Service description returned from the root endpoint."""

    name: str = Field(..., description="Application name")
    version: str = Field(..., description="Application version")
    endpoints: dict[str, str] = Field(default_factory=dict, description="Endpoint map")
