from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models
import uuid


class Match(models.Model):
    """
    A played match and its fixed costs.

    total_expense, players_count, paying_players_count and
    expense_per_player are derived by the allocation service and written
    together with the participation shares.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    team = models.ForeignKey(
        'teams.Team',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='matches'
    )
    match_date = models.DateField()
    opponent_team = models.CharField(max_length=200, blank=True)
    venue = models.CharField(max_length=200, blank=True)

    # Fixed costs
    ground_fee = models.DecimalField(
        max_digits=10, decimal_places=2, default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    ball_amount = models.DecimalField(
        max_digits=10, decimal_places=2, default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    other_expenses = models.DecimalField(
        max_digits=10, decimal_places=2, default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0.00'))]
    )

    # Derived
    total_expense = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0.00'))
    players_count = models.PositiveIntegerField(default=0)
    paying_players_count = models.PositiveIntegerField(default=0)
    expense_per_player = models.DecimalField(max_digits=16, decimal_places=6, default=Decimal('0'))

    players = models.ManyToManyField(
        'players.Player',
        through='MatchParticipation',
        related_name='matches'
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'matches'
        indexes = [
            models.Index(fields=['-match_date'], name='matches_date_idx'),
            models.Index(fields=['team', '-match_date'], name='matches_team_date_idx'),
        ]
        ordering = ['-match_date', '-created_at']
        verbose_name_plural = 'matches'

    def __str__(self):
        opponent = self.opponent_team or 'TBD'
        return f"vs {opponent} on {self.match_date}"


class MatchParticipation(models.Model):
    """A player's place in a match roster and their share of its cost."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    match = models.ForeignKey(Match, on_delete=models.CASCADE, related_name='participations')
    player = models.ForeignKey('players.Player', on_delete=models.PROTECT, related_name='match_participations')
    is_paying = models.BooleanField(default=True)
    expense_share = models.DecimalField(max_digits=16, decimal_places=6, default=Decimal('0'))
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'match_players'
        unique_together = [['match', 'player']]
        indexes = [
            models.Index(fields=['player'], name='match_players_player_idx'),
        ]
        ordering = ['created_at']

    def __str__(self):
        return f"{self.player} in {self.match}: {self.expense_share}"
