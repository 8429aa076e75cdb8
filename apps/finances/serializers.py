"""
Serializers for finances app.

This module contains:
1. Ledger serializers - Contributions and club-wide expenses
2. Response serializers - Account, team and club aggregates

All amounts leave the API rounded to cents (half up).
"""

from decimal import Decimal

from rest_framework import serializers

from apps.players.serializers import PlayerMinimalSerializer, PlayerSerializer
from config.fields import MoneyField
from .models import Contribution, Expense


# =============================================================================
# Ledger Serializers
# =============================================================================

class ContributionSerializer(serializers.ModelSerializer):
    """Contribution with the contributing player."""

    player = PlayerMinimalSerializer(read_only=True)
    player_id = serializers.UUIDField(write_only=True)
    amount = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=Decimal('0.01'))

    class Meta:
        model = Contribution
        fields = ['id', 'player', 'player_id', 'amount', 'date', 'description', 'created_at']
        read_only_fields = ['id', 'player', 'created_at']


class ExpenseSerializer(serializers.ModelSerializer):
    """Club-wide expense."""

    amount = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=Decimal('0.01'))

    class Meta:
        model = Expense
        fields = ['id', 'description', 'amount', 'date', 'category', 'created_at']
        read_only_fields = ['id', 'created_at']


# =============================================================================
# Response Serializers
# =============================================================================

class PlayerBalanceSerializer(serializers.Serializer):
    total_contributions = MoneyField()
    total_match_expenses = MoneyField()
    balance = MoneyField()


class ContributionHistorySerializer(serializers.Serializer):
    id = serializers.UUIDField()
    amount = MoneyField()
    date = serializers.DateField()
    description = serializers.CharField()
    created_at = serializers.DateTimeField()


class MatchExpenseRowSerializer(serializers.Serializer):
    match_id = serializers.UUIDField()
    match_date = serializers.DateField()
    team_name = serializers.CharField(allow_null=True)
    opponent_team = serializers.CharField()
    venue = serializers.CharField()
    total_expense = MoneyField()
    is_paying = serializers.BooleanField()
    expense_share = MoneyField()


class PlayerAccountSerializer(PlayerBalanceSerializer):
    """Player with balance and full history."""

    player = PlayerSerializer()
    contributions = ContributionHistorySerializer(many=True)
    matches = MatchExpenseRowSerializer(many=True)


class TeamFinancialsSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    name = serializers.CharField()
    date_formed = serializers.DateField()
    player_count = serializers.IntegerField()
    total_contributions = MoneyField()
    total_expenses = MoneyField()
    balance = MoneyField()


class OverallSummarySerializer(serializers.Serializer):
    total_contributions = MoneyField()
    total_expenses = MoneyField()
    balance = MoneyField()
    total_teams = serializers.IntegerField()


class OrganizationSummarySerializer(serializers.Serializer):
    """Admin dashboard: managed teams and their combined position."""

    teams = TeamFinancialsSerializer(many=True)
    overall_summary = OverallSummarySerializer()


class ClubSummarySerializer(serializers.Serializer):
    total_contributions = MoneyField()
    total_expenses = MoneyField()
    balance = MoneyField()
    total_players = serializers.IntegerField()


class ErrorSerializer(serializers.Serializer):
    error = serializers.CharField()
