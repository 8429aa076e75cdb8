import pytest
from datetime import date
from decimal import Decimal

from apps.finances.models import Contribution, Expense
from apps.teams.models import Team, TeamMembership


@pytest.fixture
def contribute(db):
    """Factory recording a contribution."""
    def _contribute(player, amount, on=date(2024, 5, 1), description=''):
        return Contribution.objects.create(
            player=player, amount=Decimal(amount), date=on, description=description
        )
    return _contribute


@pytest.fixture
def general_expense(db):
    """Factory recording a club-wide expense."""
    def _expense(amount, on=date(2024, 5, 1), description='Equipment'):
        return Expense.objects.create(description=description, amount=Decimal(amount), date=on)
    return _expense


@pytest.fixture
def make_team(db):
    """Factory creating a team with the given members."""
    def _make_team(name, members=(), manager=None):
        team = Team.objects.create(name=name, date_formed=date(2020, 1, 1), manager=manager)
        for member in members:
            TeamMembership.objects.create(team=team, player=member)
        return team
    return _make_team
