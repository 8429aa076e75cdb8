import pytest

from apps.accounts.models import User


@pytest.fixture
def inactive_user(db):
    """Create and return a deactivated account."""
    return User.objects.create_user(
        username='retired',
        password='TestPass123!',
        is_active=False,
    )


@pytest.fixture
def unlinked_user(db):
    """Create and return an account without a player profile."""
    return User.objects.create_user(username='scorer', password='TestPass123!')
