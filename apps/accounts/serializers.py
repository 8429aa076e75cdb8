from rest_framework import serializers
from django.contrib.auth.password_validation import validate_password

from apps.players.models import birthday_validator
from .models import User


class UserSerializer(serializers.ModelSerializer):
    """Basic user serializer for profile display."""

    player_id = serializers.UUIDField(read_only=True, allow_null=True)

    class Meta:
        model = User
        fields = [
            'id',
            'username',
            'role',
            'player_id',
            'created_at',
            'last_login',
        ]
        read_only_fields = fields


class UserRegistrationSerializer(serializers.Serializer):
    """Serializer for player sign-up."""

    username = serializers.CharField(max_length=150)
    password = serializers.CharField(
        write_only=True,
        required=True,
        validators=[validate_password],
        style={'input_type': 'password'}
    )
    password_confirm = serializers.CharField(
        write_only=True,
        required=True,
        style={'input_type': 'password'}
    )
    first_name = serializers.CharField(max_length=100)
    last_name = serializers.CharField(max_length=100)
    mobile_number = serializers.CharField(max_length=32, required=False, allow_blank=True)
    birthday = serializers.CharField(
        max_length=5,
        required=False,
        allow_blank=True,
        validators=[birthday_validator]
    )

    def validate(self, attrs):
        """Validate password confirmation."""
        if attrs['password'] != attrs['password_confirm']:
            raise serializers.ValidationError({
                'password_confirm': 'Passwords do not match'
            })
        return attrs


class UserLoginSerializer(serializers.Serializer):
    """Serializer for user login."""

    username = serializers.CharField(required=True)
    password = serializers.CharField(
        required=True,
        write_only=True,
        style={'input_type': 'password'}
    )
