import pytest
from datetime import date

from django.utils import timezone

from apps.teams.models import Team, TeamMembership
from apps.teams.services import (
    create_team,
    delete_team,
    add_player_to_team,
    remove_player_from_team,
    get_player_teams,
    AlreadyOnTeamError,
    NotOnTeamError,
    TeamNotFoundError,
    PlayerNotFoundError,
)


@pytest.mark.django_db
class TestMembershipManagement:

    def test_joined_date_defaults_to_today(self, team, player):
        membership = add_player_to_team(team_id=team.id, player_id=player.id)

        assert membership.joined_date == timezone.localdate()

    def test_duplicate_membership_rejected(self, team_with_members, player):
        with pytest.raises(AlreadyOnTeamError):
            add_player_to_team(team_id=team_with_members.id, player_id=player.id)

        assert TeamMembership.objects.filter(team=team_with_members, player=player).count() == 1

    def test_unknown_player(self, team):
        with pytest.raises(PlayerNotFoundError):
            add_player_to_team(team_id=team.id, player_id='00000000-0000-0000-0000-000000000000')

    def test_remove_non_member(self, team, player):
        with pytest.raises(NotOnTeamError):
            remove_player_from_team(team_id=team.id, player_id=player.id)

    def test_player_on_two_teams(self, team, player):
        other = create_team(name='Sunday XI', date_formed=date(2021, 5, 2))
        add_player_to_team(team_id=team.id, player_id=player.id)
        add_player_to_team(team_id=other.id, player_id=player.id)

        assert [m.team.name for m in get_player_teams(player_id=player.id)] == ['First XI', 'Sunday XI']


@pytest.mark.django_db
class TestTeamManagement:

    def test_delete_team_removes_memberships(self, team_with_members):
        delete_team(team_id=team_with_members.id)

        assert not Team.objects.filter(id=team_with_members.id).exists()
        assert TeamMembership.objects.count() == 0

    def test_delete_unknown_team(self):
        with pytest.raises(TeamNotFoundError):
            delete_team(team_id='00000000-0000-0000-0000-000000000000')
