"""
Players app services layer.

Services contain business logic and orchestrate operations across models.
"""

from .exceptions import (
    PlayersServiceError,
    PlayerNotFoundError,
    PlayerInUseError,
)

from .player_management import (
    get_player_by_id,
    create_player,
    update_player,
    delete_player,
)


__all__ = [
    # Exceptions
    'PlayersServiceError',
    'PlayerNotFoundError',
    'PlayerInUseError',

    # Player Management
    'get_player_by_id',
    'create_player',
    'update_player',
    'delete_player',
]
