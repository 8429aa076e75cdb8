from rest_framework import serializers
from .models import Team, TeamMembership
from apps.players.serializers import PlayerMinimalSerializer


class TeamSerializer(serializers.ModelSerializer):
    """Main serializer for teams."""

    manager = PlayerMinimalSerializer(read_only=True)
    manager_id = serializers.UUIDField(write_only=True, required=False, allow_null=True)
    manager_name = serializers.SerializerMethodField()
    player_count = serializers.SerializerMethodField()

    class Meta:
        model = Team
        fields = [
            'id',
            'name',
            'date_formed',
            'manager',
            'manager_id',
            'manager_name',
            'player_count',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'manager', 'created_at', 'updated_at']

    def get_manager_name(self, obj):
        return obj.manager.full_name if obj.manager else None

    def get_player_count(self, obj):
        """Use the annotated count when the queryset provides it."""
        count = getattr(obj, 'player_count', None)
        if count is None:
            count = obj.memberships.count()
        return count


class TeamMemberSerializer(serializers.ModelSerializer):
    """Team member with join date."""

    player = PlayerMinimalSerializer(read_only=True)

    class Meta:
        model = TeamMembership
        fields = ['id', 'player', 'joined_date']
        read_only_fields = fields


class PlayerTeamSerializer(serializers.ModelSerializer):
    """Team of a player, as seen from the player."""

    team_id = serializers.UUIDField(source='team.id', read_only=True)
    team_name = serializers.CharField(source='team.name', read_only=True)
    date_formed = serializers.DateField(source='team.date_formed', read_only=True)
    manager_name = serializers.SerializerMethodField()

    class Meta:
        model = TeamMembership
        fields = ['team_id', 'team_name', 'date_formed', 'manager_name', 'joined_date']
        read_only_fields = fields

    def get_manager_name(self, obj):
        manager = obj.team.manager
        return manager.full_name if manager else None


class AddTeamPlayerSerializer(serializers.Serializer):
    """Serializer for adding a player to a team."""

    joined_date = serializers.DateField(required=False)
