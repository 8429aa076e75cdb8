"""User registration service."""

import logging
from typing import Optional

from django.db import transaction, IntegrityError
from django.contrib.auth import get_user_model

from apps.accounts.models import UserRole
from apps.players.services import create_player

from .exceptions import UsernameTakenError

User = get_user_model()

log = logging.getLogger(__name__)


@transaction.atomic
def register_user(
    *,
    username: str,
    password: str,
    first_name: str,
    last_name: str,
    mobile_number: str = "",
    birthday: str = "",
    logger: Optional[logging.Logger] = None
) -> User:
    """
    Register a player account.

    Creates the player profile and the linked user in one transaction, so a
    failed user insert leaves no orphaned player behind.

    Args:
        username: Unique login name
        password: User's password (will be hashed)
        first_name: Player first name
        last_name: Player last name
        mobile_number: Optional contact number
        birthday: Optional birthday in MM-DD format

    Returns:
        Created User instance, linked to its new Player

    Raises:
        UsernameTakenError: If the username already exists
    """
    if User.objects.filter(username=username).exists():
        raise UsernameTakenError("Username already exists")

    player = create_player(
        first_name=first_name,
        last_name=last_name,
        mobile_number=mobile_number,
        birthday=birthday,
        logger=logger,
    )

    try:
        with transaction.atomic():
            user = User.objects.create_user(
                username=username,
                password=password,
                role=UserRole.PLAYER,
                player=player,
            )
    except IntegrityError:
        raise UsernameTakenError("Username already exists")

    (logger or log).info("User signed up: %s (player %s)", user.username, player.id)
    return user
