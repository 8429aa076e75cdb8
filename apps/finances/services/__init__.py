"""
Finances app services layer.

Services contain business logic and orchestrate operations across models.
"""

from .exceptions import (
    FinancesServiceError,
    PlayerNotFoundError,
    TeamNotFoundError,
    ContributionNotFoundError,
    ExpenseNotFoundError,
)

from .account_aggregation import AccountAggregator

from .ledger import (
    create_contribution,
    delete_contribution,
    create_expense,
    delete_expense,
)


__all__ = [
    # Exceptions
    'FinancesServiceError',
    'PlayerNotFoundError',
    'TeamNotFoundError',
    'ContributionNotFoundError',
    'ExpenseNotFoundError',

    # Aggregation
    'AccountAggregator',

    # Ledger
    'create_contribution',
    'delete_contribution',
    'create_expense',
    'delete_expense',
]
