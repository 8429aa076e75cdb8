import pytest
from decimal import Decimal
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from config.fields import MoneyField


@pytest.mark.django_db
class TestHealthCheck:

    def test_health_check(self, api_client):
        response = api_client.get(reverse('health-check'))

        assert response.status_code == status.HTTP_200_OK
        assert response.json()['status'] == 'healthy'
        assert response.json()['database'] == 'connected'


@pytest.mark.django_db
class TestCorrelationId:

    def test_generated_when_missing(self, api_client):
        response = api_client.get(reverse('health-check'))

        assert response['X-Correlation-ID']

    def test_echoed_from_request(self):
        client = APIClient(HTTP_X_CORRELATION_ID='match-day-42')

        response = client.get(reverse('health-check'))

        assert response['X-Correlation-ID'] == 'match-day-42'


@pytest.mark.django_db
class TestErrorShape:

    def test_unauthenticated_error_body(self, api_client):
        response = api_client.get(reverse('players:player-list'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert set(response.data) == {'error'}

    def test_malformed_filter_id(self, admin_client):
        response = admin_client.get(reverse('matches:match-list'), {'team': 'not-a-uuid'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'error' in response.data


class TestMoneyField:

    def test_rounds_half_up_to_cents(self):
        field = MoneyField()

        assert field.to_representation(Decimal('166.666667')) == '166.67'
        assert field.to_representation(Decimal('0.125')) == '0.13'
        assert field.to_representation(Decimal('-16.666667')) == '-16.67'
