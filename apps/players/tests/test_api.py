import pytest
from datetime import date
from decimal import Decimal
from django.urls import reverse
from rest_framework import status

from apps.finances.models import Contribution
from apps.players.models import Player
from apps.teams.models import Team, TeamMembership


@pytest.mark.django_db
class TestPlayerList:
    """Tests for GET /api/players/"""

    def test_list_players(self, player_client, make_player):
        make_player(first_name='Tom', last_name='Hughes')
        url = reverse('players:player-list')
        response = player_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert 'results' in response.data
        names = [p['full_name'] for p in response.data['results']]
        assert 'Tom Hughes' in names

    def test_search_players(self, player_client, make_player):
        make_player(first_name='Tom', last_name='Hughes')
        make_player(first_name='Ravi', last_name='Kumar')
        url = reverse('players:player-list')
        response = player_client.get(url, {'search': 'kum'})

        assert response.status_code == status.HTTP_200_OK
        assert [p['full_name'] for p in response.data['results']] == ['Ravi Kumar']

    def test_list_players_unauthenticated(self, api_client):
        url = reverse('players:player-list')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert 'error' in response.data


@pytest.mark.django_db
class TestPlayerCreate:
    """Tests for POST /api/players/"""

    def test_admin_creates_player(self, admin_client):
        url = reverse('players:player-list')
        data = {
            'first_name': 'Jack',
            'last_name': 'Moore',
            'mobile_number': '07700 900005',
            'birthday': '11-21',
        }
        response = admin_client.post(url, data)

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['full_name'] == 'Jack Moore'
        assert Player.objects.filter(first_name='Jack', last_name='Moore').exists()

    def test_invalid_birthday_rejected(self, admin_client):
        url = reverse('players:player-list')
        response = admin_client.post(url, {'first_name': 'Jack', 'last_name': 'Moore', 'birthday': '13-40'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'birthday' in response.data['error']

    def test_player_cannot_create_player(self, player_client):
        url = reverse('players:player-list')
        response = player_client.post(url, {'first_name': 'Jack', 'last_name': 'Moore'})

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.data['error'] == 'Access denied. Admin only.'


@pytest.mark.django_db
class TestPlayerUpdateDelete:
    """Tests for PATCH/DELETE /api/players/{id}/"""

    def test_admin_updates_player(self, admin_client, make_player):
        target = make_player(first_name='Tom', last_name='Hughes')
        url = reverse('players:player-detail', args=[target.id])
        response = admin_client.patch(url, {'mobile_number': '07700 123456'})

        assert response.status_code == status.HTTP_200_OK
        target.refresh_from_db()
        assert target.mobile_number == '07700 123456'
        assert target.first_name == 'Tom'

    def test_admin_deletes_player_without_history(self, admin_client, make_player):
        target = make_player()
        url = reverse('players:player-detail', args=[target.id])
        response = admin_client.delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Player.objects.filter(id=target.id).exists()

    def test_delete_player_with_contributions_conflicts(self, admin_client, make_player):
        target = make_player()
        Contribution.objects.create(player=target, amount=Decimal('50.00'), date=date.today())
        url = reverse('players:player-detail', args=[target.id])
        response = admin_client.delete(url)

        assert response.status_code == status.HTTP_409_CONFLICT
        assert 'cannot be deleted' in response.data['error']
        assert Player.objects.filter(id=target.id).exists()

    def test_unknown_player_returns_404(self, admin_client):
        url = reverse('players:player-detail', args=['00000000-0000-0000-0000-000000000000'])
        response = admin_client.delete(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.django_db
class TestPlayerTeams:
    """Tests for GET /api/players/{id}/teams/"""

    def test_player_teams(self, player_client, player, admin_player):
        team = Team.objects.create(name='First XI', date_formed=date(2019, 4, 1), manager=admin_player)
        TeamMembership.objects.create(team=team, player=player)

        url = reverse('players:player-teams', args=[player.id])
        response = player_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 1
        assert response.data[0]['team_name'] == 'First XI'
        assert response.data[0]['manager_name'] == 'Sam Reed'
