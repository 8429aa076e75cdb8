"""
Match management service.

Creates, edits and deletes matches. A match and its roster are written in
one transaction, and every change that affects costs or the paying roster
re-splits the total across all paying participants.
"""

import logging
from datetime import date
from decimal import Decimal
from typing import Iterable, Mapping, Optional, Union
from uuid import UUID

from django.db import transaction
from django.db.models import QuerySet

from apps.matches.models import Match, MatchParticipation
from apps.players.models import Player
from apps.teams.models import Team

from .allocation import ExpenseAllocator
from .exceptions import (
    MatchNotFoundError,
    PlayerNotFoundError,
    TeamNotFoundError,
    NoPlayersSelectedError,
    NoPayingPlayersError,
)

log = logging.getLogger(__name__)

MATCH_DETAIL_FIELDS = ('match_date', 'opponent_team', 'venue')
COST_FIELDS = ('ground_fee', 'ball_amount', 'other_expenses')


def _lock_match(match_id: UUID) -> Match:
    try:
        return Match.objects.select_for_update().get(id=match_id)
    except Match.DoesNotExist:
        raise MatchNotFoundError(f"Match with ID {match_id} not found")


def _resolve_team(team_id: Optional[UUID]) -> Optional[Team]:
    if team_id is None:
        return None
    try:
        return Team.objects.get(id=team_id)
    except Team.DoesNotExist:
        raise TeamNotFoundError(f"Team with ID {team_id} not found")


def _as_uuid(value) -> UUID:
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except ValueError:
        raise PlayerNotFoundError(f"Player with ID {value} not found")


def _normalize_roster(players: Union[Mapping, Iterable]) -> dict:
    """
    Turn roster input into an ordered ``{player_id: is_paying}`` dict.

    Accepts a mapping, or an iterable of dicts with ``player_id`` and an
    optional ``is_paying`` (default True). Later duplicates win.
    """
    if isinstance(players, Mapping):
        entries = players.items()
    else:
        entries = ((entry['player_id'], entry.get('is_paying', True)) for entry in players)

    roster = {}
    for pid, is_paying in entries:
        roster[_as_uuid(pid)] = bool(is_paying)
    return roster


def reallocate_match_shares(match: Match) -> dict:
    """
    Re-split ``match.total_expense`` over its current roster and persist it.

    Must run inside the transaction holding the match row lock.

    Returns:
        The allocation result dict.
    """
    participations = list(match.participations.all())
    roster = {p.player_id: p.is_paying for p in participations}
    allocation = ExpenseAllocator.recompute_on_membership_change(match, roster)

    for participation in participations:
        participation.expense_share = allocation['shares'][participation.player_id]
    MatchParticipation.objects.bulk_update(participations, ['expense_share'])

    match.players_count = allocation['players_count']
    match.paying_players_count = allocation['paying_players_count']
    match.expense_per_player = allocation['expense_per_player']
    match.save(update_fields=[
        'players_count', 'paying_players_count', 'expense_per_player', 'updated_at',
    ])
    return allocation


@transaction.atomic
def create_match(
    *,
    match_date: date,
    players,
    team_id: Optional[UUID] = None,
    opponent_team: str = '',
    venue: str = '',
    ground_fee=None,
    ball_amount=None,
    other_expenses=None,
    logger: Optional[logging.Logger] = None
) -> Match:
    """
    Create a match together with its roster.

    Args:
        match_date: Date the match was played
        players: Roster, either ``{player_id: is_paying}`` or a list of
            ``{'player_id': ..., 'is_paying': ...}`` dicts
        team_id: Optional UUID of the team playing
        opponent_team: Opponent name
        venue: Venue name
        ground_fee: Ground fee (missing counts as 0)
        ball_amount: Ball cost (missing counts as 0)
        other_expenses: Other costs (missing counts as 0)

    Returns:
        Created Match instance with shares allocated

    Raises:
        NoPlayersSelectedError: If the roster is empty
        NoPayingPlayersError: If nobody on the roster pays
        TeamNotFoundError: If team doesn't exist
        PlayerNotFoundError: If any roster player doesn't exist
    """
    roster = _normalize_roster(players)
    if not roster:
        raise NoPlayersSelectedError()
    if not any(roster.values()):
        raise NoPayingPlayersError()

    team = _resolve_team(team_id)

    known = set(Player.objects.filter(id__in=roster.keys()).values_list('id', flat=True))
    missing = [str(pid) for pid in roster if pid not in known]
    if missing:
        raise PlayerNotFoundError(f"Players not found: {', '.join(missing)}")

    costs = {
        'ground_fee': ExpenseAllocator.to_decimal(ground_fee),
        'ball_amount': ExpenseAllocator.to_decimal(ball_amount),
        'other_expenses': ExpenseAllocator.to_decimal(other_expenses),
    }
    total = ExpenseAllocator.compute_total(**costs)
    allocation = ExpenseAllocator.allocate(
        total,
        [pid for pid, is_paying in roster.items() if is_paying],
        [pid for pid, is_paying in roster.items() if not is_paying],
    )

    match = Match.objects.create(
        team=team,
        match_date=match_date,
        opponent_team=opponent_team,
        venue=venue,
        total_expense=allocation['total_expense'],
        players_count=allocation['players_count'],
        paying_players_count=allocation['paying_players_count'],
        expense_per_player=allocation['expense_per_player'],
        **costs,
    )

    MatchParticipation.objects.bulk_create([
        MatchParticipation(
            match=match,
            player_id=pid,
            is_paying=is_paying,
            expense_share=allocation['shares'][pid],
        )
        for pid, is_paying in roster.items()
    ])

    (logger or log).info(
        "Match created: %s (total=%s, players=%s, paying=%s)",
        match.id, match.total_expense, match.players_count, match.paying_players_count,
    )
    return match


@transaction.atomic
def update_match(
    *,
    match_id: UUID,
    logger: Optional[logging.Logger] = None,
    **fields
) -> Match:
    """
    Update match details and fixed costs.

    Accepts ``team_id``, ``match_date``, ``opponent_team``, ``venue`` and the
    cost fields. When a cost changes the total is recomputed and re-split
    across the current paying participants.

    Raises:
        MatchNotFoundError: If match doesn't exist
        TeamNotFoundError: If the new team doesn't exist
    """
    match = _lock_match(match_id)

    if 'team_id' in fields:
        match.team = _resolve_team(fields['team_id'])

    for name in MATCH_DETAIL_FIELDS:
        if fields.get(name) is not None:
            setattr(match, name, fields[name])

    costs_changed = False
    for name in COST_FIELDS:
        if name in fields:
            setattr(match, name, ExpenseAllocator.to_decimal(fields[name]))
            costs_changed = True

    if costs_changed:
        match.total_expense = ExpenseAllocator.compute_total(
            match.ground_fee, match.ball_amount, match.other_expenses
        )

    match.save()

    if costs_changed:
        reallocate_match_shares(match)
        (logger or log).info("Match %s costs updated, total=%s", match.id, match.total_expense)

    return match


@transaction.atomic
def delete_match(*, match_id: UUID, logger: Optional[logging.Logger] = None) -> None:
    """
    Delete a match and its roster.

    Raises:
        MatchNotFoundError: If match doesn't exist
    """
    match = _lock_match(match_id)
    match.delete()
    (logger or log).info("Match deleted: %s", match_id)


def get_match(*, match_id: UUID) -> Match:
    """
    Get a match with its roster.

    Raises:
        MatchNotFoundError: If match doesn't exist
    """
    try:
        return (
            Match.objects
            .select_related('team')
            .prefetch_related('participations__player')
            .get(id=match_id)
        )
    except Match.DoesNotExist:
        raise MatchNotFoundError(f"Match with ID {match_id} not found")


def list_matches(*, team_id: Optional[UUID] = None, player_id: Optional[UUID] = None) -> QuerySet[Match]:
    """List matches newest first, optionally filtered by team or player."""
    queryset = Match.objects.select_related('team').prefetch_related('participations__player')
    if team_id is not None:
        queryset = queryset.filter(team_id=team_id)
    if player_id is not None:
        queryset = queryset.filter(participations__player_id=player_id)
    return queryset.order_by('-match_date', '-created_at')
