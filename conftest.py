import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken

from apps.accounts.models import User, UserRole
from apps.players.models import Player


def authenticate(client, user):
    """Attach a JWT access token for ``user`` to ``client``."""
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def make_player(db):
    """Factory creating players with sequential names."""
    counter = {'n': 0}

    def _make(first_name=None, last_name='Player', **extra):
        counter['n'] += 1
        return Player.objects.create(
            first_name=first_name or f"Player{counter['n']}",
            last_name=last_name,
            **extra,
        )

    return _make


@pytest.fixture
def player(make_player):
    """Create and return a player with a login."""
    return make_player(first_name='Priya', last_name='Shah', mobile_number='07700 900002')


@pytest.fixture
def admin_player(make_player):
    """Player profile linked to the admin account."""
    return make_player(first_name='Sam', last_name='Reed')


@pytest.fixture
def admin_user(db, admin_player):
    """Create and return a club admin."""
    return User.objects.create_user(
        username='clubadmin',
        password='TestPass123!',
        role=UserRole.ADMIN,
        player=admin_player,
    )


@pytest.fixture
def player_user(db, player):
    """Create and return a regular player user."""
    return User.objects.create_user(
        username='priya',
        password='TestPass123!',
        role=UserRole.PLAYER,
        player=player,
    )


@pytest.fixture
def admin_client(admin_user):
    """Return API client authenticated as the club admin."""
    return authenticate(APIClient(), admin_user)


@pytest.fixture
def player_client(player_user):
    """Return API client authenticated as a regular player."""
    return authenticate(APIClient(), player_user)
