import pytest
from datetime import date
from decimal import Decimal

from apps.matches.services import create_match
from apps.players.models import Player
from apps.players.services import (
    create_player,
    update_player,
    delete_player,
    get_player_by_id,
    PlayerNotFoundError,
    PlayerInUseError,
)


@pytest.mark.django_db
class TestPlayerManagement:

    def test_create_player(self):
        player = create_player(first_name='Ravi', last_name='Kumar', birthday='01-05')

        assert player.full_name == 'Ravi Kumar'
        assert Player.objects.get(id=player.id).birthday == '01-05'

    def test_update_skips_none_values(self, make_player):
        player = make_player(first_name='Tom', last_name='Hughes', email='tom@example.com')

        updated = update_player(player_id=player.id, first_name='Thomas', email=None)

        assert updated.first_name == 'Thomas'
        assert updated.email == 'tom@example.com'

    def test_get_unknown_player(self):
        with pytest.raises(PlayerNotFoundError):
            get_player_by_id(player_id='00000000-0000-0000-0000-000000000000')

    def test_player_in_match_cannot_be_deleted(self, make_player):
        player = make_player()
        create_match(match_date=date.today(), players={player.id: True}, ground_fee=Decimal('100'))

        with pytest.raises(PlayerInUseError):
            delete_player(player_id=player.id)

        assert Player.objects.filter(id=player.id).exists()
