"""
Domain-specific exceptions for finances app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class FinancesServiceError(Exception):
    """Base exception for all finances service errors."""
    pass


class PlayerNotFoundError(FinancesServiceError):
    """Raised when a player does not exist."""
    pass


class TeamNotFoundError(FinancesServiceError):
    """Raised when a team does not exist."""
    pass


class ContributionNotFoundError(FinancesServiceError):
    """Raised when a contribution does not exist."""
    pass


class ExpenseNotFoundError(FinancesServiceError):
    """Raised when an expense does not exist."""
    pass
