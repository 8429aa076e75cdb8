"""
Domain-specific exceptions for players app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class PlayersServiceError(Exception):
    """Base exception for all players service errors."""
    pass


class PlayerNotFoundError(PlayersServiceError):
    """Raised when a player does not exist."""
    pass


class PlayerInUseError(PlayersServiceError):
    """Raised when deleting a player still referenced by contributions or matches."""
    pass
