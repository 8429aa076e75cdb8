"""
Team management service.

Handles team CRUD operations.
"""

import logging
from datetime import date
from typing import Optional
from uuid import UUID

from django.db import transaction

from apps.players.models import Player
from apps.teams.models import Team

from .exceptions import TeamNotFoundError, PlayerNotFoundError

log = logging.getLogger(__name__)


def _resolve_manager(manager_id: Optional[UUID]) -> Optional[Player]:
    if manager_id is None:
        return None
    try:
        return Player.objects.get(id=manager_id)
    except Player.DoesNotExist:
        raise PlayerNotFoundError(f"Player with ID {manager_id} not found")


def get_team_by_id(*, team_id: UUID) -> Team:
    """
    Get a team by ID.

    Raises:
        TeamNotFoundError: If team doesn't exist
    """
    try:
        return Team.objects.select_related('manager').get(id=team_id)
    except Team.DoesNotExist:
        raise TeamNotFoundError(f"Team with ID {team_id} not found")


def create_team(
    *,
    name: str,
    date_formed: date,
    manager_id: Optional[UUID] = None,
    logger: Optional[logging.Logger] = None
) -> Team:
    """
    Create a new team.

    Args:
        name: Team name
        date_formed: Date the team was formed
        manager_id: Optional UUID of the managing player

    Returns:
        Created Team instance

    Raises:
        PlayerNotFoundError: If the manager doesn't exist
    """
    team = Team.objects.create(
        name=name,
        date_formed=date_formed,
        manager=_resolve_manager(manager_id),
    )
    (logger or log).info("Team created: %s (%s)", team.name, team.id)
    return team


@transaction.atomic
def update_team(
    *,
    team_id: UUID,
    name: Optional[str] = None,
    date_formed: Optional[date] = None,
    manager_id: Optional[UUID] = None,
    clear_manager: bool = False
) -> Team:
    """
    Update team details.

    Raises:
        TeamNotFoundError: If team doesn't exist
        PlayerNotFoundError: If the new manager doesn't exist
    """
    try:
        team = Team.objects.select_for_update().get(id=team_id)
    except Team.DoesNotExist:
        raise TeamNotFoundError(f"Team with ID {team_id} not found")

    if name is not None:
        team.name = name
    if date_formed is not None:
        team.date_formed = date_formed
    if clear_manager:
        team.manager = None
    elif manager_id is not None:
        team.manager = _resolve_manager(manager_id)

    team.save()
    return team


@transaction.atomic
def delete_team(*, team_id: UUID, logger: Optional[logging.Logger] = None) -> None:
    """
    Delete a team and its memberships.

    Matches of the team keep their history with the team cleared.

    Raises:
        TeamNotFoundError: If team doesn't exist
    """
    team = get_team_by_id(team_id=team_id)
    team.delete()
    (logger or log).info("Team deleted: %s", team_id)
