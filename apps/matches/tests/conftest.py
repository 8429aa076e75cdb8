import pytest
from datetime import date
from decimal import Decimal

from apps.matches.services import create_match
from apps.teams.models import Team


@pytest.fixture
def roster(make_player):
    """Four players for a match roster."""
    return [make_player() for _ in range(4)]


@pytest.fixture
def team(db, admin_player):
    return Team.objects.create(name='First XI', date_formed=date(2019, 4, 1), manager=admin_player)


@pytest.fixture
def match(roster, team):
    """Match costing 500 with all four players paying."""
    return create_match(
        team_id=team.id,
        match_date=date(2024, 6, 1),
        opponent_team='Riverside CC',
        venue='Home Ground',
        ground_fee=Decimal('300'),
        ball_amount=Decimal('150'),
        other_expenses=Decimal('50'),
        players={p.id: True for p in roster},
    )


@pytest.fixture
def three_payer_match(make_player):
    """Match costing 300 split over three paying players."""
    players = [make_player() for _ in range(3)]
    match = create_match(
        match_date=date(2024, 6, 8),
        ground_fee=Decimal('300'),
        players={p.id: True for p in players},
    )
    return match, players
