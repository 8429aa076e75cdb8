"""
Domain-specific exceptions for teams app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class TeamsServiceError(Exception):
    """Base exception for all teams service errors."""
    pass


class TeamNotFoundError(TeamsServiceError):
    """Raised when a team does not exist."""
    pass


class PlayerNotFoundError(TeamsServiceError):
    """Raised when a player referenced by a team operation does not exist."""
    pass


class AlreadyOnTeamError(TeamsServiceError):
    """Raised when a player is added to a team they already belong to."""
    pass


class NotOnTeamError(TeamsServiceError):
    """Raised when removing a player who is not on the team."""
    pass
