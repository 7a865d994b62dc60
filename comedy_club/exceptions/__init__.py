"""
Custom exceptions for the application.

Every failure the joke service can report is one of these types, so callers
match on the class instead of parsing messages.
"""


class AppError(Exception):
    """Base exception for application errors."""

    pass


class JokeNotFoundError(AppError):
    """Raised when no joke exists for the given id."""

    def __init__(self, joke_id: str):
        super().__init__(f"Joke not found: {joke_id}")
        self.joke_id = joke_id


class InvalidIdentifierError(AppError):
    """Raised when a joke id is not a well-formed identifier."""

    def __init__(self, joke_id: str):
        super().__init__(f"Invalid joke id: {joke_id!r}")
        self.joke_id = joke_id


class NoJokesAvailableError(AppError):
    """Raised when the store holds no jokes."""

    pass


class StoreUnavailableError(AppError):
    """Raised when the joke store cannot be reached."""

    pass


class CacheUnavailableError(AppError):
    """Raised when the cache cannot be reached."""

    pass


class ConfigurationError(AppError):
    """Raised when configuration is invalid."""

    pass
