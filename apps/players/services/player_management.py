"""
Player management service.

Handles player CRUD operations. Players referenced by contributions or
match participations are protected from deletion by the database.
"""

import logging
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.db.models import ProtectedError

from apps.players.models import Player

from .exceptions import PlayerNotFoundError, PlayerInUseError

log = logging.getLogger(__name__)

UPDATABLE_FIELDS = ('first_name', 'last_name', 'mobile_number', 'email', 'birthday')


def get_player_by_id(*, player_id: UUID) -> Player:
    """
    Get a player by ID.

    Raises:
        PlayerNotFoundError: If player doesn't exist
    """
    try:
        return Player.objects.get(id=player_id)
    except Player.DoesNotExist:
        raise PlayerNotFoundError(f"Player with ID {player_id} not found")


def create_player(
    *,
    first_name: str,
    last_name: str,
    mobile_number: str = '',
    email: str = '',
    birthday: str = '',
    logger: Optional[logging.Logger] = None
) -> Player:
    """Create a new player profile."""
    player = Player.objects.create(
        first_name=first_name,
        last_name=last_name,
        mobile_number=mobile_number,
        email=email,
        birthday=birthday,
    )
    (logger or log).info("Player created: %s (%s)", player.full_name, player.id)
    return player


@transaction.atomic
def update_player(*, player_id: UUID, **fields) -> Player:
    """
    Update player details.

    Only fields listed in UPDATABLE_FIELDS are applied; None values are skipped.

    Raises:
        PlayerNotFoundError: If player doesn't exist
    """
    try:
        player = Player.objects.select_for_update().get(id=player_id)
    except Player.DoesNotExist:
        raise PlayerNotFoundError(f"Player with ID {player_id} not found")

    update_fields = ['updated_at']
    for name in UPDATABLE_FIELDS:
        value = fields.get(name)
        if value is not None:
            setattr(player, name, value)
            update_fields.append(name)

    player.save(update_fields=update_fields)
    return player


@transaction.atomic
def delete_player(*, player_id: UUID, logger: Optional[logging.Logger] = None) -> None:
    """
    Delete a player.

    Raises:
        PlayerNotFoundError: If player doesn't exist
        PlayerInUseError: If contributions or match participations reference the player
    """
    player = get_player_by_id(player_id=player_id)

    try:
        player.delete()
    except ProtectedError:
        raise PlayerInUseError(
            f"{player.full_name} has contributions or match expenses and cannot be deleted"
        )

    (logger or log).info("Player deleted: %s", player_id)
