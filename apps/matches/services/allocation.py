"""
Expense Allocation Module
=========================

This module splits a match's fixed costs across its paying participants.

Classes:
    ExpenseAllocator: Static methods computing totals and per-player shares.

Example:
    Splitting a match among four players, one of them not paying::

        from decimal import Decimal
        from apps.matches.services.allocation import ExpenseAllocator

        total = ExpenseAllocator.compute_total('300', '150', '50')
        result = ExpenseAllocator.allocate(
            total,
            paying_player_ids=[p1.id, p2.id, p3.id],
            non_paying_player_ids=[p4.id],
        )
        result['expense_per_player']   # Decimal('166.666667')
        result['shares'][p4.id]        # Decimal('0')

Note:
    The allocator never touches the database. Callers persist its output
    inside the same transaction that changed the roster.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from .exceptions import InvalidAllocationError

ZERO = Decimal('0')
CENT = Decimal('0.01')
SHARE_PRECISION = Decimal('0.000001')


class ExpenseAllocator:
    """
    Equal-split allocation of match costs.

    Every paying participant gets the same share, ``total / paying_count``,
    kept at six decimal places so repeated re-splits do not accumulate
    rounding error. Non-paying participants always get zero. Shares are
    rounded to cents only when presented.

    Methods:
        to_decimal: Coerce loose input to a finite Decimal.
        compute_total: Sum the fixed costs of a match.
        allocate: Split a total across a paying roster.
        recompute_on_membership_change: Re-split a persisted match total.
    """

    @staticmethod
    def to_decimal(value):
        """
        Coerce a cost value to Decimal.

        Missing, empty, unparseable or non-finite values count as zero.
        """
        if value is None or value == '':
            return ZERO
        if isinstance(value, float):
            value = repr(value)
        try:
            amount = Decimal(value)
        except (InvalidOperation, TypeError, ValueError):
            return ZERO
        if not amount.is_finite():
            return ZERO
        return amount

    @staticmethod
    def compute_total(ground_fee=None, ball_amount=None, other_expenses=None):
        """
        Sum the fixed costs of a match.

        Args:
            ground_fee: Ground rental fee.
            ball_amount: Cost of match balls.
            other_expenses: Anything else charged to the match.

        Returns:
            Decimal: The total, quantized to cents.
        """
        total = (
            ExpenseAllocator.to_decimal(ground_fee)
            + ExpenseAllocator.to_decimal(ball_amount)
            + ExpenseAllocator.to_decimal(other_expenses)
        )
        return total.quantize(CENT, rounding=ROUND_HALF_UP)

    @staticmethod
    def allocate(total, paying_player_ids, non_paying_player_ids=()):
        """
        Split ``total`` equally across the paying players.

        Args:
            total: Match total expense.
            paying_player_ids: Ids of participants who pay.
            non_paying_player_ids: Ids of participants who play for free.
                An id present in both collections counts as non-paying.

        Returns:
            dict: A dictionary containing:
                - total_expense (Decimal): The total, at cent precision.
                - expense_per_player (Decimal): The equal share, 0 when
                  nobody pays.
                - players_count (int): All distinct participants.
                - paying_players_count (int): Distinct paying participants.
                - shares (dict): Player id to Decimal share, in roster order
                  (paying players first).

        Raises:
            InvalidAllocationError: If the shares drift from the total by
                more than one cent per paying player.

        Example:
            >>> result = ExpenseAllocator.allocate(Decimal('300'), ['a', 'b', 'c'])
            >>> result['expense_per_player']
            Decimal('100.000000')
        """
        total = ExpenseAllocator.to_decimal(total).quantize(CENT, rounding=ROUND_HALF_UP)

        non_paying = list(dict.fromkeys(non_paying_player_ids))
        excluded = set(non_paying)
        paying = [pid for pid in dict.fromkeys(paying_player_ids) if pid not in excluded]

        paying_count = len(paying)
        if paying_count:
            per_player = (total / paying_count).quantize(SHARE_PRECISION, rounding=ROUND_HALF_UP)
        else:
            per_player = ZERO

        shares = {pid: per_player for pid in paying}
        for pid in non_paying:
            shares[pid] = ZERO

        if paying_count:
            drift = abs(per_player * paying_count - total)
            if drift > CENT * paying_count:
                raise InvalidAllocationError(
                    f"Shares of {per_player} x {paying_count} do not add up to {total}"
                )

        return {
            'total_expense': total,
            'expense_per_player': per_player,
            'players_count': len(shares),
            'paying_players_count': paying_count,
            'shares': shares,
        }

    @staticmethod
    def recompute_on_membership_change(match, roster):
        """
        Re-split a match's persisted total over a changed roster.

        Fixed costs are not touched by roster changes, so the split always
        starts from ``match.total_expense``. Every share is recomputed; none
        is adjusted incrementally.

        Args:
            match: Object exposing ``total_expense``.
            roster (dict): Player id to ``is_paying`` flag.

        Returns:
            dict: Same shape as :meth:`allocate`.
        """
        paying = [pid for pid, is_paying in roster.items() if is_paying]
        non_paying = [pid for pid, is_paying in roster.items() if not is_paying]
        return ExpenseAllocator.allocate(match.total_expense, paying, non_paying)
