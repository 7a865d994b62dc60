"""
Joke models.

Sandi Metz Principles:
- Single Responsibility: Joke data structure
- Clear naming: Descriptive fields
- Immutable data: Jokes are never edited in place
"""

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field


class JokeInput(BaseModel):
    """Joke to be inserted into the store."""

    model_config = ConfigDict(frozen=True)

    setup: str = Field(..., min_length=1, description="Joke setup")
    punchline: str = Field(..., min_length=1, description="Joke punchline")
    times_displayed: int = Field(default=0, ge=0, description="Initial display count")

    def to_document(self) -> dict[str, Any]:
        """Convert to a store document (without id)."""
        return self.model_dump()


class Joke(BaseModel):
    """Stored joke with its display counter."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Store-assigned identifier")
    setup: str = Field(..., min_length=1, description="Joke setup")
    punchline: str = Field(..., min_length=1, description="Joke punchline")
    times_displayed: int = Field(default=0, ge=0, description="Times served")

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> "Joke":
        """
        Build a joke from a MongoDB document.

        Args:
            document: Raw document with an ``_id`` field

        Returns:
            Joke instance
        """
        return cls(
            id=str(document["_id"]),
            setup=document["setup"],
            punchline=document["punchline"],
            times_displayed=document.get("times_displayed", 0),
        )
