from decimal import Decimal

from rest_framework import serializers

from apps.players.serializers import PlayerMinimalSerializer
from config.fields import MoneyField
from .models import Match, MatchParticipation


class MatchParticipationSerializer(serializers.ModelSerializer):
    """Roster entry with the player's share of the match cost."""

    player = PlayerMinimalSerializer(read_only=True)
    expense_share = MoneyField()

    class Meta:
        model = MatchParticipation
        fields = ['id', 'player', 'is_paying', 'expense_share']
        read_only_fields = fields


class MatchListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for list views."""

    team_id = serializers.UUIDField(read_only=True, allow_null=True)
    team_name = serializers.CharField(source='team.name', read_only=True, default=None)
    ground_fee = MoneyField()
    ball_amount = MoneyField()
    other_expenses = MoneyField()
    total_expense = MoneyField()
    expense_per_player = MoneyField()

    class Meta:
        model = Match
        fields = [
            'id',
            'team_id',
            'team_name',
            'match_date',
            'opponent_team',
            'venue',
            'ground_fee',
            'ball_amount',
            'other_expenses',
            'total_expense',
            'players_count',
            'paying_players_count',
            'expense_per_player',
            'created_at',
        ]
        read_only_fields = fields


class MatchSerializer(MatchListSerializer):
    """Match with its full roster."""

    participants = MatchParticipationSerializer(source='participations', many=True, read_only=True)

    class Meta(MatchListSerializer.Meta):
        fields = MatchListSerializer.Meta.fields + ['participants', 'updated_at']
        read_only_fields = fields


class MatchPlayerInputSerializer(serializers.Serializer):
    player_id = serializers.UUIDField()
    is_paying = serializers.BooleanField(default=True)


def _cost_field():
    return serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=Decimal('0'),
        required=False,
        allow_null=True,
    )


class MatchCreateSerializer(serializers.Serializer):
    """Serializer for creating a match with its roster."""

    team_id = serializers.UUIDField(required=False, allow_null=True)
    match_date = serializers.DateField()
    opponent_team = serializers.CharField(max_length=200, required=False, allow_blank=True, default='')
    venue = serializers.CharField(max_length=200, required=False, allow_blank=True, default='')
    ground_fee = _cost_field()
    ball_amount = _cost_field()
    other_expenses = _cost_field()
    players = MatchPlayerInputSerializer(many=True, required=False, default=list)


class MatchUpdateSerializer(serializers.Serializer):
    """Serializer for editing match details and costs. Roster changes use the player endpoints."""

    team_id = serializers.UUIDField(required=False, allow_null=True)
    match_date = serializers.DateField(required=False)
    opponent_team = serializers.CharField(max_length=200, required=False, allow_blank=True)
    venue = serializers.CharField(max_length=200, required=False, allow_blank=True)
    ground_fee = _cost_field()
    ball_amount = _cost_field()
    other_expenses = _cost_field()


class AddMatchPlayerSerializer(serializers.Serializer):
    is_paying = serializers.BooleanField(default=True)


class PayingStatusSerializer(serializers.Serializer):
    is_paying = serializers.BooleanField()
