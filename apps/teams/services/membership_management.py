"""
Membership management service.

Handles adding and removing players from teams.
"""

import logging
from datetime import date
from typing import Optional
from uuid import UUID

from django.db import transaction, IntegrityError
from django.db.models import QuerySet

from apps.players.models import Player
from apps.teams.models import Team, TeamMembership

from .exceptions import (
    TeamNotFoundError,
    PlayerNotFoundError,
    AlreadyOnTeamError,
    NotOnTeamError,
)

log = logging.getLogger(__name__)


@transaction.atomic
def add_player_to_team(
    *,
    team_id: UUID,
    player_id: UUID,
    joined_date: Optional[date] = None,
    logger: Optional[logging.Logger] = None
) -> TeamMembership:
    """
    Add a player to a team.

    Args:
        team_id: UUID of the team
        player_id: UUID of the player
        joined_date: Date the player joined (defaults to today)

    Returns:
        Created TeamMembership instance

    Raises:
        TeamNotFoundError: If team doesn't exist
        PlayerNotFoundError: If player doesn't exist
        AlreadyOnTeamError: If the player is already on the team
    """
    try:
        team = Team.objects.select_for_update().get(id=team_id)
    except Team.DoesNotExist:
        raise TeamNotFoundError(f"Team with ID {team_id} not found")

    try:
        player = Player.objects.get(id=player_id)
    except Player.DoesNotExist:
        raise PlayerNotFoundError(f"Player with ID {player_id} not found")

    if team.has_member(player):
        raise AlreadyOnTeamError(f"{player.full_name} is already on {team.name}")

    fields = {'team': team, 'player': player}
    if joined_date is not None:
        fields['joined_date'] = joined_date

    try:
        membership = TeamMembership.objects.create(**fields)
    except IntegrityError:
        raise AlreadyOnTeamError(f"{player.full_name} is already on {team.name}")

    (logger or log).info("Player %s added to team %s", player.id, team.id)
    return membership


@transaction.atomic
def remove_player_from_team(
    *,
    team_id: UUID,
    player_id: UUID,
    logger: Optional[logging.Logger] = None
) -> None:
    """
    Remove a player from a team.

    Raises:
        TeamNotFoundError: If team doesn't exist
        NotOnTeamError: If the player is not on the team
    """
    if not Team.objects.filter(id=team_id).exists():
        raise TeamNotFoundError(f"Team with ID {team_id} not found")

    deleted, _ = TeamMembership.objects.filter(team_id=team_id, player_id=player_id).delete()
    if not deleted:
        raise NotOnTeamError("Player is not a member of this team")

    (logger or log).info("Player %s removed from team %s", player_id, team_id)


def get_team_members(*, team_id: UUID) -> QuerySet[TeamMembership]:
    """
    Get all memberships of a team, sorted by player name.

    Raises:
        TeamNotFoundError: If team doesn't exist
    """
    if not Team.objects.filter(id=team_id).exists():
        raise TeamNotFoundError(f"Team with ID {team_id} not found")

    return (
        TeamMembership.objects
        .filter(team_id=team_id)
        .select_related('player')
        .order_by('player__first_name', 'player__last_name')
    )


def get_player_teams(*, player_id: UUID) -> QuerySet[TeamMembership]:
    """Get all team memberships of a player, sorted by team name."""
    return (
        TeamMembership.objects
        .filter(player_id=player_id)
        .select_related('team', 'team__manager')
        .order_by('team__name')
    )
