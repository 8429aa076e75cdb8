from rest_framework import status, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework_simplejwt.tokens import RefreshToken
from rest_framework_simplejwt.exceptions import TokenError
from drf_spectacular.utils import extend_schema

from apps.finances.serializers import PlayerBalanceSerializer
from apps.finances.services import AccountAggregator
from apps.players.serializers import PlayerSerializer
from apps.teams.serializers import PlayerTeamSerializer
from apps.teams.services import get_player_teams
from config.middleware import get_request_logger

from .serializers import (
    UserRegistrationSerializer,
    UserLoginSerializer,
    UserSerializer,
)
from .services import (
    register_user,
    authenticate_user,
    UsernameTakenError,
    InvalidCredentialsError,
    InactiveAccountError,
)


# Response serializers for API documentation
class TokensResponseSerializer(serializers.Serializer):
    refresh = serializers.CharField()
    access = serializers.CharField()


class AuthResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    user = UserSerializer()
    tokens = TokensResponseSerializer()


class MessageResponseSerializer(serializers.Serializer):
    message = serializers.CharField()


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


class LogoutRequestSerializer(serializers.Serializer):
    refresh = serializers.CharField(required=False, help_text="Refresh token to invalidate")


class ProfileResponseSerializer(serializers.Serializer):
    player = PlayerSerializer(allow_null=True)
    teams = PlayerTeamSerializer(many=True)
    account_summary = PlayerBalanceSerializer(allow_null=True)


def _tokens_for(user):
    refresh = RefreshToken.for_user(user)
    return {
        'refresh': str(refresh),
        'access': str(refresh.access_token),
    }


@extend_schema(
    request=UserRegistrationSerializer,
    responses={
        201: AuthResponseSerializer,
        400: ErrorResponseSerializer,
        409: ErrorResponseSerializer,
    },
    description="Sign up as a player. Creates the player profile and the login account together.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def register(request):
    """Register a new player account."""
    serializer = UserRegistrationSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    data = serializer.validated_data.copy()
    data.pop('password_confirm', None)

    try:
        user = register_user(**data, logger=get_request_logger(request))
    except UsernameTakenError as e:
        return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

    return Response({
        'message': 'User and player profile created successfully',
        'user': UserSerializer(user).data,
        'tokens': _tokens_for(user),
    }, status=status.HTTP_201_CREATED)


@extend_schema(
    request=UserLoginSerializer,
    responses={
        200: AuthResponseSerializer,
        400: ErrorResponseSerializer,
        401: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
    },
    description="Authenticate with username and password to receive JWT tokens.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    """Login with username and password."""
    serializer = UserLoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        user = authenticate_user(**serializer.validated_data)
    except InvalidCredentialsError as e:
        get_request_logger(request).warning(
            "Failed login for %s", serializer.validated_data['username']
        )
        return Response({'error': str(e)}, status=status.HTTP_401_UNAUTHORIZED)
    except InactiveAccountError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    return Response({
        'message': 'Login successful',
        'user': UserSerializer(user).data,
        'tokens': _tokens_for(user),
    })


@extend_schema(
    request=LogoutRequestSerializer,
    responses={
        200: MessageResponseSerializer,
        400: ErrorResponseSerializer,
    },
    description="Logout. Tokens are stateless, so the client discards them; a refresh token, if sent, is validated.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def logout(request):
    """Logout and validate the optional refresh token."""
    refresh_token = request.data.get('refresh')
    if refresh_token:
        try:
            RefreshToken(refresh_token)
        except TokenError:
            return Response({'error': 'Invalid token'}, status=status.HTTP_400_BAD_REQUEST)

    return Response({'message': 'Logged out successfully'})


@extend_schema(
    responses={200: UserSerializer},
    description="Get the current authenticated user.",
    tags=['auth'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_current_user(request):
    """Get current authenticated user."""
    return Response(UserSerializer(request.user).data)


@extend_schema(
    responses={200: ProfileResponseSerializer},
    description="Get the linked player profile, the player's teams and account summary.",
    tags=['auth'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def profile(request):
    """Profile of the current user's linked player."""
    player = request.user.player
    if player is None:
        return Response({'player': None, 'teams': [], 'account_summary': None})

    data = {
        'player': player,
        'teams': get_player_teams(player_id=player.id).order_by('-joined_date'),
        'account_summary': AccountAggregator.player_balance(player.id),
    }
    return Response(ProfileResponseSerializer(data).data)
