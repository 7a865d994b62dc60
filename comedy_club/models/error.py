"""
Error response models.

Sandi Metz Principles:
- Small classes with clear purpose
- Consistent error handling
- Clear naming conventions
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: str = Field(..., description="Short message describing what went wrong")

    @classmethod
    def no_jokes(cls) -> "ErrorResponse":
        """Create empty store error."""
        return cls(error="No jokes found")

    @classmethod
    def joke_not_found(cls) -> "ErrorResponse":
        """Create unknown joke error."""
        return cls(error="Joke not found")

    @classmethod
    def serve_failed(cls) -> "ErrorResponse":
        """Create random joke failure error."""
        return cls(error="Server error fetching joke")

    @classmethod
    def internal_error(cls) -> "ErrorResponse":
        """Create internal server error."""
        return cls(error="Server error")


class UnhealthyResponse(BaseModel):
    """Health check failure response."""

    status: str = Field(default="unhealthy", description="Service status")
    error: str = Field(..., description="Failing dependency")
