"""
Account Aggregation Module
==========================

This module derives player balances and rolls them up per team, per
managing admin and for the whole club.

Classes:
    AccountAggregator: Static methods for balance and summary queries.

Key Features:
    - Player balance: contributions minus allocated match shares
    - Player history: contributions and match expenses, newest first
    - Team financials with general expenses prorated by team size
    - Organization summary for the teams an admin manages
    - Club-wide summary

Example:
    Getting a player's balance::

        from apps.finances.services import AccountAggregator

        balance = AccountAggregator.player_balance(player.id)
        print(f"Balance: {balance['balance']}")

Note:
    This module is read-only. Nothing is cached or stored: every value is
    derived from contributions, expenses and persisted match shares at
    call time. Amounts are returned at full precision; serializers round
    them to cents.
"""

from decimal import Decimal, ROUND_HALF_UP

from django.db.models import Sum, Count, DecimalField
from django.db.models.functions import Coalesce

from apps.finances.models import Contribution, Expense
from apps.matches.models import Match, MatchParticipation
from apps.players.models import Player
from apps.teams.models import Team, TeamMembership

from .exceptions import PlayerNotFoundError, TeamNotFoundError

ZERO = Decimal('0')
PRORATION_PRECISION = Decimal('0.000001')


def _sum(queryset, field):
    """Sum ``field`` over ``queryset`` in one aggregate query, 0 when empty."""
    return queryset.aggregate(
        total=Coalesce(Sum(field), ZERO, output_field=DecimalField())
    )['total']


class AccountAggregator:
    """
    Read-time balance derivations.

    Methods:
        player_balance: Totals and balance of one player.
        player_history: Contribution and match-expense rows of one player.
        player_account: Player, balance and history together.
        team_financials: Contributions, expenses and balance of one team.
        organization_summary: Per-team breakdown for a managing player.
        club_summary: Club-wide totals.
    """

    @staticmethod
    def player_balance(player_id):
        """
        Calculate a player's running balance.

        Args:
            player_id (UUID): The player's unique identifier.

        Returns:
            dict: A dictionary containing:
                - total_contributions (Decimal): Sum of the player's contributions.
                - total_match_expenses (Decimal): Sum of the player's match shares.
                - balance (Decimal): Contributions minus match expenses.

        Example:
            Two contributions of 100 and 50 and one match share of 60::

                AccountAggregator.player_balance(player.id)['balance']
                # Decimal('90')
        """
        total_contributions = _sum(Contribution.objects.filter(player_id=player_id), 'amount')
        total_match_expenses = _sum(
            MatchParticipation.objects.filter(player_id=player_id), 'expense_share'
        )
        return {
            'total_contributions': total_contributions,
            'total_match_expenses': total_match_expenses,
            'balance': total_contributions - total_match_expenses,
        }

    @staticmethod
    def player_history(player_id):
        """
        Get a player's contributions and match expenses.

        Args:
            player_id (UUID): The player's unique identifier.

        Returns:
            tuple: A tuple containing:
                - list[dict]: Contributions, newest first.
                - list[dict]: Match expense rows, newest match first. Each
                  row carries the match details, the team name and the
                  player's own ``expense_share``.
        """
        contributions = list(
            Contribution.objects
            .filter(player_id=player_id)
            .order_by('-date', '-created_at')
            .values('id', 'amount', 'date', 'description', 'created_at')
        )

        matches = [
            {
                'match_id': participation.match_id,
                'match_date': participation.match.match_date,
                'team_name': participation.match.team.name if participation.match.team else None,
                'opponent_team': participation.match.opponent_team,
                'venue': participation.match.venue,
                'total_expense': participation.match.total_expense,
                'is_paying': participation.is_paying,
                'expense_share': participation.expense_share,
            }
            for participation in (
                MatchParticipation.objects
                .filter(player_id=player_id)
                .select_related('match', 'match__team')
                .order_by('-match__match_date', '-match__created_at')
            )
        ]
        return contributions, matches

    @staticmethod
    def player_account(player_id):
        """
        Get the full account of a player.

        Returns:
            dict: ``player`` (Player), the keys of :meth:`player_balance`,
            ``contributions`` and ``matches`` from :meth:`player_history`.

        Raises:
            PlayerNotFoundError: If the player doesn't exist.
        """
        try:
            player = Player.objects.get(id=player_id)
        except Player.DoesNotExist:
            raise PlayerNotFoundError(f"Player with ID {player_id} not found")

        contributions, matches = AccountAggregator.player_history(player.id)
        return {
            'player': player,
            **AccountAggregator.player_balance(player.id),
            'contributions': contributions,
            'matches': matches,
        }

    @staticmethod
    def general_expense_context():
        """
        Read the club-wide figures used to prorate general expenses.

        Returns:
            tuple: (general expense total, count of all team membership rows).
        """
        return _sum(Expense.objects.all(), 'amount'), TeamMembership.objects.count()

    @staticmethod
    def team_financials(team_id, general_total=None, membership_total=None):
        """
        Calculate a team's financial position.

        General (non-match) expenses are spread over every team membership
        row in the club and charged to the team by its member count. A
        player on two teams counts twice. Match expenses are charged wholly
        to the team that played.

        Args:
            team_id (UUID): The team's unique identifier.
            general_total (Decimal, optional): Pre-read general expense total.
            membership_total (int, optional): Pre-read membership row count.
                Both are read from the database when not given.

        Returns:
            dict: A dictionary containing:
                - id, name, date_formed: Team details.
                - player_count (int): Current members.
                - total_contributions (Decimal): Contributions of current members.
                - total_expenses (Decimal): Prorated general plus match expenses.
                - balance (Decimal): Contributions minus expenses.

        Raises:
            TeamNotFoundError: If the team doesn't exist.

        Example:
            2 members, general expenses 1000 over 10 memberships, matches 200::

                AccountAggregator.team_financials(team.id)['total_expenses']
                # Decimal('400')
        """
        team = (
            Team.objects
            .annotate(player_count=Count('memberships'))
            .filter(id=team_id)
            .first()
        )
        if team is None:
            raise TeamNotFoundError(f"Team with ID {team_id} not found")

        if general_total is None or membership_total is None:
            general_total, membership_total = AccountAggregator.general_expense_context()

        total_contributions = _sum(
            Contribution.objects.filter(player__team_memberships__team_id=team.id), 'amount'
        )
        match_expenses = _sum(Match.objects.filter(team_id=team.id), 'total_expense')

        if membership_total:
            general_share = (general_total * team.player_count / membership_total).quantize(
                PRORATION_PRECISION, rounding=ROUND_HALF_UP
            )
        else:
            general_share = ZERO

        total_expenses = general_share + match_expenses
        return {
            'id': team.id,
            'name': team.name,
            'date_formed': team.date_formed,
            'player_count': team.player_count,
            'total_contributions': total_contributions,
            'total_expenses': total_expenses,
            'balance': total_contributions - total_expenses,
        }

    @staticmethod
    def organization_summary(manager_id):
        """
        Summarize the teams managed by a player.

        The general expense total and membership count are read once and
        shared by every team in the summary.

        Args:
            manager_id (UUID | None): The managing player's id. None yields
                an empty summary.

        Returns:
            dict: A dictionary containing:
                - teams (list[dict]): :meth:`team_financials` per team, by name.
                - overall_summary (dict): total_contributions, total_expenses,
                  balance and total_teams.
        """
        team_ids = []
        if manager_id is not None:
            team_ids = list(
                Team.objects.filter(manager_id=manager_id).order_by('name').values_list('id', flat=True)
            )

        teams = []
        if team_ids:
            general_total, membership_total = AccountAggregator.general_expense_context()
            teams = [
                AccountAggregator.team_financials(
                    team_id,
                    general_total=general_total,
                    membership_total=membership_total,
                )
                for team_id in team_ids
            ]

        total_contributions = sum((t['total_contributions'] for t in teams), ZERO)
        total_expenses = sum((t['total_expenses'] for t in teams), ZERO)
        return {
            'teams': teams,
            'overall_summary': {
                'total_contributions': total_contributions,
                'total_expenses': total_expenses,
                'balance': total_contributions - total_expenses,
                'total_teams': len(teams),
            },
        }

    @staticmethod
    def club_summary():
        """
        Club-wide totals.

        Returns:
            dict: total_contributions, total_expenses (general plus all
            match totals), balance and total_players.
        """
        total_contributions = _sum(Contribution.objects.all(), 'amount')
        general_total = _sum(Expense.objects.all(), 'amount')
        match_total = _sum(Match.objects.all(), 'total_expense')
        total_expenses = general_total + match_total
        return {
            'total_contributions': total_contributions,
            'total_expenses': total_expenses,
            'balance': total_contributions - total_expenses,
            'total_players': Player.objects.count(),
        }
