from django.db.models import Q
from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination

from apps.accounts.permissions import IsClubAdmin
from apps.teams.serializers import PlayerTeamSerializer
from apps.teams.services import get_player_teams
from config.middleware import get_request_logger

from .models import Player
from .serializers import PlayerSerializer
from .services import (
    create_player,
    update_player,
    delete_player,
    PlayerNotFoundError,
    PlayerInUseError,
)


class PlayerPagination(PageNumberPagination):
    """Custom pagination for players."""
    page_size = 50
    page_size_query_param = 'page_size'
    max_page_size = 200


class PlayerViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Player CRUD operations.

    list: Get all players (newest first)
    create: Register a player profile (admin only)
    retrieve: Get a specific player
    update: Update a player (admin only)
    partial_update: Partially update a player (admin only)
    destroy: Delete a player without financial history (admin only)
    """

    queryset = Player.objects.all()
    serializer_class = PlayerSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = PlayerPagination
    lookup_value_regex = r'[0-9a-fA-F-]{32,36}'

    def get_permissions(self):
        """Writes are restricted to club admins."""
        if self.action in ['create', 'update', 'partial_update', 'destroy']:
            return [IsAuthenticated(), IsClubAdmin()]
        return [IsAuthenticated()]

    def get_queryset(self):
        queryset = super().get_queryset()
        search = self.request.query_params.get('search')
        if search:
            queryset = queryset.filter(
                Q(first_name__icontains=search) | Q(last_name__icontains=search)
            )
        return queryset

    def create(self, request, *args, **kwargs):
        """Create a player."""
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        player = create_player(**serializer.validated_data, logger=get_request_logger(request))
        return Response(PlayerSerializer(player).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        """Update a player."""
        partial = kwargs.pop('partial', False)
        serializer = self.get_serializer(self.get_object(), data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        player = update_player(player_id=kwargs['pk'], **serializer.validated_data)
        return Response(PlayerSerializer(player).data)

    def destroy(self, request, *args, **kwargs):
        """Delete a player."""
        try:
            delete_player(player_id=kwargs['pk'], logger=get_request_logger(request))
        except PlayerNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except PlayerInUseError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=['get'])
    def teams(self, request, pk=None):
        """Get all teams the player belongs to."""
        player = self.get_object()
        memberships = get_player_teams(player_id=player.id)
        serializer = PlayerTeamSerializer(memberships, many=True)
        return Response(serializer.data)
