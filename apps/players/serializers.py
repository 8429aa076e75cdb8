from rest_framework import serializers
from .models import Player


class PlayerSerializer(serializers.ModelSerializer):
    """Main serializer for players."""

    full_name = serializers.CharField(read_only=True)

    class Meta:
        model = Player
        fields = [
            'id',
            'first_name',
            'last_name',
            'full_name',
            'mobile_number',
            'email',
            'birthday',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'full_name', 'created_at', 'updated_at']


class PlayerMinimalSerializer(serializers.ModelSerializer):
    """Minimal player info for nested serialization."""

    full_name = serializers.CharField(read_only=True)

    class Meta:
        model = Player
        fields = ['id', 'first_name', 'last_name', 'full_name']
        read_only_fields = fields
