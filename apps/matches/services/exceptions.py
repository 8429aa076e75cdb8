"""
Domain-specific exceptions for matches app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class MatchesServiceError(Exception):
    """Base exception for all matches service errors."""
    pass


class MatchNotFoundError(MatchesServiceError):
    """Raised when a match does not exist."""
    pass


class PlayerNotFoundError(MatchesServiceError):
    """Raised when a roster references an unknown player."""
    pass


class TeamNotFoundError(MatchesServiceError):
    """Raised when a match references an unknown team."""
    pass


class ParticipationNotFoundError(MatchesServiceError):
    """Raised when a player is not part of the match roster."""
    pass


class InvalidRosterError(MatchesServiceError):
    """Base for roster states that cannot be persisted."""
    pass


class NoPlayersSelectedError(InvalidRosterError):
    """Raised when a match is created without any player."""

    def __init__(self, message="Please select at least one player for the match"):
        super().__init__(message)


class NoPayingPlayersError(InvalidRosterError):
    """Raised when a roster change would leave a match without a paying player."""

    def __init__(self, message="At least one player must be a paying player"):
        super().__init__(message)


class AlreadyInMatchError(MatchesServiceError):
    """Raised when adding a player who is already in the match."""
    pass


class InvalidAllocationError(MatchesServiceError):
    """Raised when computed shares do not add up to the match total."""
    pass
