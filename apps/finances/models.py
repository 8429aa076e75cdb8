from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models
import uuid


class Contribution(models.Model):
    """Money paid into the club by a player."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    player = models.ForeignKey('players.Player', on_delete=models.PROTECT, related_name='contributions')
    amount = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    date = models.DateField()
    description = models.CharField(max_length=255, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'contributions'
        indexes = [
            models.Index(fields=['player', '-date'], name='contributions_player_idx'),
            models.Index(fields=['-date'], name='contributions_date_idx'),
        ]
        ordering = ['-date', '-created_at']

    def __str__(self):
        return f"{self.player} paid {self.amount} on {self.date}"


class Expense(models.Model):
    """Club-wide expense not tied to a match (equipment, fees, etc.)."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    description = models.CharField(max_length=255)
    amount = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    date = models.DateField()
    category = models.CharField(max_length=100, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'expenses'
        indexes = [
            models.Index(fields=['-date'], name='expenses_date_idx'),
        ]
        ordering = ['-date', '-created_at']

    def __str__(self):
        return f"{self.description}: {self.amount}"
