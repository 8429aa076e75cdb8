"""
Participation management service.

Roster changes on an existing match: add a player, remove a player, and
toggle whether a player pays. Each change locks the match row, applies the
change and re-splits the match total over the new paying roster in the same
transaction. No change may leave a match without a paying participant.
"""

import logging
from typing import Optional
from uuid import UUID

from django.db import transaction, IntegrityError

from apps.matches.models import Match, MatchParticipation
from apps.players.models import Player

from .exceptions import (
    MatchNotFoundError,
    PlayerNotFoundError,
    ParticipationNotFoundError,
    NoPayingPlayersError,
    AlreadyInMatchError,
)
from .match_management import reallocate_match_shares

log = logging.getLogger(__name__)


def _lock_match(match_id: UUID) -> Match:
    try:
        return Match.objects.select_for_update().get(id=match_id)
    except Match.DoesNotExist:
        raise MatchNotFoundError(f"Match with ID {match_id} not found")


def _get_participation(match: Match, player_id: UUID) -> MatchParticipation:
    try:
        return match.participations.select_related('player').get(player_id=player_id)
    except MatchParticipation.DoesNotExist:
        raise ParticipationNotFoundError("Player not found in this match")


def _is_last_payer(match: Match, participation: MatchParticipation) -> bool:
    if not participation.is_paying:
        return False
    return not match.participations.filter(is_paying=True).exclude(id=participation.id).exists()


@transaction.atomic
def add_player_to_match(
    *,
    match_id: UUID,
    player_id: UUID,
    is_paying: bool = True,
    logger: Optional[logging.Logger] = None
) -> MatchParticipation:
    """
    Add a player to a match and re-split the total.

    Args:
        match_id: UUID of the match
        player_id: UUID of the player
        is_paying: Whether the player shares the match cost

    Returns:
        Created MatchParticipation with its recomputed share

    Raises:
        MatchNotFoundError: If match doesn't exist
        PlayerNotFoundError: If player doesn't exist
        AlreadyInMatchError: If the player is already on the roster
    """
    match = _lock_match(match_id)

    try:
        player = Player.objects.get(id=player_id)
    except Player.DoesNotExist:
        raise PlayerNotFoundError(f"Player with ID {player_id} not found")

    if match.participations.filter(player=player).exists():
        raise AlreadyInMatchError("Player already in this match")

    try:
        with transaction.atomic():
            participation = MatchParticipation.objects.create(
                match=match,
                player=player,
                is_paying=is_paying,
            )
    except IntegrityError:
        raise AlreadyInMatchError("Player already in this match")

    allocation = reallocate_match_shares(match)
    participation.expense_share = allocation['shares'][player.id]

    (logger or log).info(
        "Player %s added to match %s (paying=%s), share now %s",
        player.id, match.id, is_paying, allocation['expense_per_player'],
    )
    return participation


@transaction.atomic
def remove_player_from_match(
    *,
    match_id: UUID,
    player_id: UUID,
    logger: Optional[logging.Logger] = None
) -> Match:
    """
    Remove a player from a match and re-split the total.

    The participation row is deleted, not zeroed.

    Returns:
        The updated Match

    Raises:
        MatchNotFoundError: If match doesn't exist
        ParticipationNotFoundError: If the player is not on the roster
        NoPayingPlayersError: If the player is the last paying participant
    """
    match = _lock_match(match_id)
    participation = _get_participation(match, player_id)

    if _is_last_payer(match, participation):
        raise NoPayingPlayersError()

    participation.delete()
    allocation = reallocate_match_shares(match)

    (logger or log).info(
        "Player %s removed from match %s, share now %s",
        player_id, match.id, allocation['expense_per_player'],
    )
    return match


@transaction.atomic
def set_paying_status(
    *,
    match_id: UUID,
    player_id: UUID,
    is_paying: bool,
    logger: Optional[logging.Logger] = None
) -> Match:
    """
    Toggle whether a participant pays and re-split the total.

    Returns:
        The updated Match

    Raises:
        MatchNotFoundError: If match doesn't exist
        ParticipationNotFoundError: If the player is not on the roster
        NoPayingPlayersError: If the last paying participant would stop paying
    """
    match = _lock_match(match_id)
    participation = _get_participation(match, player_id)

    if not is_paying and _is_last_payer(match, participation):
        raise NoPayingPlayersError()

    participation.is_paying = is_paying
    participation.save(update_fields=['is_paying'])
    allocation = reallocate_match_shares(match)

    (logger or log).info(
        "Player %s paying status in match %s set to %s, share now %s",
        player_id, match.id, is_paying, allocation['expense_per_player'],
    )
    return match
