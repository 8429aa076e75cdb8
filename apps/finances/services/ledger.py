"""
Ledger service.

Records and deletes contributions and club-wide expenses.
"""

import logging
from datetime import date
from decimal import Decimal
from typing import Optional
from uuid import UUID

from django.db import transaction

from apps.finances.models import Contribution, Expense
from apps.players.models import Player

from .exceptions import PlayerNotFoundError, ContributionNotFoundError, ExpenseNotFoundError

log = logging.getLogger(__name__)


def create_contribution(
    *,
    player_id: UUID,
    amount: Decimal,
    date: date,
    description: str = '',
    logger: Optional[logging.Logger] = None
) -> Contribution:
    """
    Record a payment into the club by a player.

    Raises:
        PlayerNotFoundError: If player doesn't exist
    """
    try:
        player = Player.objects.get(id=player_id)
    except Player.DoesNotExist:
        raise PlayerNotFoundError(f"Player with ID {player_id} not found")

    contribution = Contribution.objects.create(
        player=player,
        amount=amount,
        date=date,
        description=description,
    )
    (logger or log).info("Contribution recorded: %s from player %s", contribution.amount, player.id)
    return contribution


@transaction.atomic
def delete_contribution(*, contribution_id: UUID, logger: Optional[logging.Logger] = None) -> None:
    """
    Delete a contribution.

    Raises:
        ContributionNotFoundError: If contribution doesn't exist
    """
    deleted, _ = Contribution.objects.filter(id=contribution_id).delete()
    if not deleted:
        raise ContributionNotFoundError(f"Contribution with ID {contribution_id} not found")
    (logger or log).info("Contribution deleted: %s", contribution_id)


def create_expense(
    *,
    description: str,
    amount: Decimal,
    date: date,
    category: str = '',
    logger: Optional[logging.Logger] = None
) -> Expense:
    """Record a club-wide expense."""
    expense = Expense.objects.create(
        description=description,
        amount=amount,
        date=date,
        category=category,
    )
    (logger or log).info("Expense recorded: %s (%s)", expense.amount, expense.description)
    return expense


@transaction.atomic
def delete_expense(*, expense_id: UUID, logger: Optional[logging.Logger] = None) -> None:
    """
    Delete a club-wide expense.

    Raises:
        ExpenseNotFoundError: If expense doesn't exist
    """
    deleted, _ = Expense.objects.filter(id=expense_id).delete()
    if not deleted:
        raise ExpenseNotFoundError(f"Expense with ID {expense_id} not found")
    (logger or log).info("Expense deleted: %s", expense_id)
