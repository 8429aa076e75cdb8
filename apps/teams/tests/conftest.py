import pytest
from datetime import date

from apps.teams.models import Team, TeamMembership


@pytest.fixture
def team(db, admin_player):
    """Team managed by the admin's player."""
    return Team.objects.create(name='First XI', date_formed=date(2019, 4, 1), manager=admin_player)


@pytest.fixture
def team_with_members(team, player, make_player):
    """Team with three members, the regular player among them."""
    TeamMembership.objects.create(team=team, player=player)
    TeamMembership.objects.create(team=team, player=make_player(first_name='Tom', last_name='Hughes'))
    TeamMembership.objects.create(team=team, player=make_player(first_name='Ravi', last_name='Kumar'))
    return team
