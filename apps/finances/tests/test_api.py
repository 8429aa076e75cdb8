import pytest
from datetime import date
from decimal import Decimal
from django.urls import reverse
from rest_framework import status

from apps.finances.models import Contribution, Expense
from apps.matches.services import create_match
from apps.teams.models import Team, TeamMembership


@pytest.mark.django_db
class TestContributions:

    def test_admin_records_contribution(self, admin_client, player):
        response = admin_client.post(reverse('finances:contribution-list'), {
            'player_id': str(player.id),
            'amount': '100.00',
            'date': '2024-05-01',
            'description': 'Season subs',
        })

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['amount'] == '100.00'
        assert response.data['player']['full_name'] == 'Priya Shah'
        assert Contribution.objects.filter(player=player).count() == 1

    def test_player_cannot_record_contribution(self, player_client, player):
        response = player_client.post(reverse('finances:contribution-list'), {
            'player_id': str(player.id),
            'amount': '100.00',
            'date': '2024-05-01',
        })

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert not Contribution.objects.exists()

    def test_zero_amount_rejected(self, admin_client, player):
        response = admin_client.post(reverse('finances:contribution-list'), {
            'player_id': str(player.id),
            'amount': '0',
            'date': '2024-05-01',
        })

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'amount' in response.data['details']

    def test_unknown_player(self, admin_client):
        response = admin_client.post(reverse('finances:contribution-list'), {
            'player_id': '00000000-0000-0000-0000-000000000000',
            'amount': '10.00',
            'date': '2024-05-01',
        })

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_list_filtered_by_player(self, admin_client, player, admin_player):
        Contribution.objects.create(player=player, amount=Decimal('20'), date=date(2024, 5, 1))
        Contribution.objects.create(player=admin_player, amount=Decimal('30'), date=date(2024, 5, 2))

        response = admin_client.get(reverse('finances:contribution-list'), {'player': str(player.id)})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 1
        assert response.data['results'][0]['amount'] == '20.00'

    def test_delete_contribution(self, admin_client, player):
        contribution = Contribution.objects.create(player=player, amount=Decimal('20'), date=date(2024, 5, 1))

        url = reverse('finances:contribution-detail', kwargs={'pk': contribution.id})
        response = admin_client.delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Contribution.objects.exists()


@pytest.mark.django_db
class TestExpenses:

    def test_admin_records_expense(self, admin_client):
        response = admin_client.post(reverse('finances:expense-list'), {
            'description': 'New stumps',
            'amount': '45.50',
            'date': '2024-04-20',
            'category': 'Equipment',
        })

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['amount'] == '45.50'
        assert Expense.objects.get().category == 'Equipment'

    def test_player_can_list_expenses(self, player_client):
        Expense.objects.create(description='Nets', amount=Decimal('80'), date=date(2024, 4, 1))

        response = player_client.get(reverse('finances:expense-list'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 1

    def test_delete_unknown_expense(self, admin_client):
        url = reverse('finances:expense-detail', kwargs={'pk': '00000000-0000-0000-0000-000000000000'})
        response = admin_client.delete(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.django_db
class TestPlayerAccount:

    @pytest.fixture
    def account_activity(self, player, make_player):
        other = make_player()
        Contribution.objects.create(player=player, amount=Decimal('100'), date=date(2024, 5, 1))
        Contribution.objects.create(player=player, amount=Decimal('50'), date=date(2024, 5, 10))
        create_match(
            match_date=date(2024, 6, 1),
            ground_fee='500',
            players={player.id: True, other.id: True, make_player().id: True},
        )
        return player

    def test_player_reads_own_account(self, player_client, account_activity):
        url = reverse('finances:player-account', kwargs={'player_id': account_activity.id})
        response = player_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['player']['first_name'] == 'Priya'
        assert response.data['total_contributions'] == '150.00'
        assert response.data['total_match_expenses'] == '166.67'
        assert response.data['balance'] == '-16.67'
        assert [c['amount'] for c in response.data['contributions']] == ['50.00', '100.00']
        assert response.data['matches'][0]['expense_share'] == '166.67'
        assert response.data['matches'][0]['is_paying'] is True

    def test_player_cannot_read_other_account(self, player_client, admin_player):
        url = reverse('finances:player-account', kwargs={'player_id': admin_player.id})
        response = player_client.get(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_admin_reads_any_account(self, admin_client, account_activity):
        url = reverse('finances:player-account', kwargs={'player_id': account_activity.id})
        response = admin_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['balance'] == '-16.67'

    def test_unknown_player(self, admin_client):
        url = reverse('finances:player-account', kwargs={'player_id': '00000000-0000-0000-0000-000000000000'})
        response = admin_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert 'not found' in response.data['error']

    def test_requires_authentication(self, api_client, player):
        url = reverse('finances:player-account', kwargs={'player_id': player.id})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestAggregates:

    def test_team_financials(self, admin_client, player, admin_player):
        team = Team.objects.create(name='First XI', date_formed=date(2020, 1, 1), manager=admin_player)
        TeamMembership.objects.create(team=team, player=player)
        Contribution.objects.create(player=player, amount=Decimal('75'), date=date(2024, 5, 1))
        Expense.objects.create(description='Insurance', amount=Decimal('30'), date=date(2024, 5, 1))

        url = reverse('finances:team-financials', kwargs={'team_id': team.id})
        response = admin_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['player_count'] == 1
        assert response.data['total_contributions'] == '75.00'
        assert response.data['total_expenses'] == '30.00'
        assert response.data['balance'] == '45.00'

    def test_team_financials_admin_only(self, player_client):
        url = reverse('finances:team-financials', kwargs={'team_id': '00000000-0000-0000-0000-000000000000'})
        response = player_client.get(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_dashboard_lists_managed_teams(self, admin_client, admin_player):
        Team.objects.create(name='Sunday XI', date_formed=date(2021, 1, 1), manager=admin_player)
        Team.objects.create(name='First XI', date_formed=date(2020, 1, 1), manager=admin_player)
        Team.objects.create(name='Veterans', date_formed=date(2019, 1, 1))

        response = admin_client.get(reverse('finances:dashboard'))

        assert response.status_code == status.HTTP_200_OK
        assert [t['name'] for t in response.data['teams']] == ['First XI', 'Sunday XI']
        assert response.data['overall_summary']['total_teams'] == 2
        assert response.data['overall_summary']['balance'] == '0.00'

    def test_dashboard_admin_only(self, player_client):
        response = player_client.get(reverse('finances:dashboard'))

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_club_summary(self, player_client, player):
        Contribution.objects.create(player=player, amount=Decimal('200'), date=date(2024, 5, 1))
        Expense.objects.create(description='Nets', amount=Decimal('50.50'), date=date(2024, 5, 1))

        response = player_client.get(reverse('finances:summary'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['total_contributions'] == '200.00'
        assert response.data['total_expenses'] == '50.50'
        assert response.data['balance'] == '149.50'
        assert response.data['total_players'] == 1
