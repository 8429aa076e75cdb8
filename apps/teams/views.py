from django.db.models import Count
from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema

from apps.accounts.permissions import IsClubAdmin
from config.middleware import get_request_logger

from .models import Team
from .serializers import (
    TeamSerializer,
    TeamMemberSerializer,
    AddTeamPlayerSerializer,
)
from .services import (
    create_team,
    update_team,
    delete_team,
    add_player_to_team,
    remove_player_from_team,
    get_team_members,
    # Exceptions
    TeamNotFoundError,
    PlayerNotFoundError,
    AlreadyOnTeamError,
    NotOnTeamError,
)

UUID_PATTERN = r'[0-9a-fA-F-]{32,36}'


class TeamPagination(PageNumberPagination):
    """Custom pagination for teams."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class TeamViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Team CRUD operations.

    list: Get all teams with player counts
    create: Create a team (admin only)
    retrieve: Get a specific team
    update: Update a team (admin only)
    partial_update: Partially update a team (admin only)
    destroy: Delete a team (admin only)
    """

    serializer_class = TeamSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = TeamPagination
    lookup_value_regex = UUID_PATTERN

    def get_queryset(self):
        return (
            Team.objects
            .select_related('manager')
            .annotate(player_count=Count('memberships'))
            .order_by('name')
        )

    def get_permissions(self):
        """Writes and roster changes are restricted to club admins."""
        if self.action in ['create', 'update', 'partial_update', 'destroy', 'player']:
            return [IsAuthenticated(), IsClubAdmin()]
        return [IsAuthenticated()]

    def create(self, request, *args, **kwargs):
        """Create a team."""
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            team = create_team(
                name=serializer.validated_data['name'],
                date_formed=serializer.validated_data['date_formed'],
                manager_id=serializer.validated_data.get('manager_id'),
                logger=get_request_logger(request),
            )
        except PlayerNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(TeamSerializer(team).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        """Update a team."""
        partial = kwargs.pop('partial', False)
        serializer = self.get_serializer(self.get_object(), data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        data = serializer.validated_data
        try:
            team = update_team(
                team_id=kwargs['pk'],
                name=data.get('name'),
                date_formed=data.get('date_formed'),
                manager_id=data.get('manager_id'),
                clear_manager='manager_id' in data and data['manager_id'] is None,
            )
        except (TeamNotFoundError, PlayerNotFoundError) as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(TeamSerializer(team).data)

    def destroy(self, request, *args, **kwargs):
        """Delete a team."""
        try:
            delete_team(team_id=kwargs['pk'], logger=get_request_logger(request))
        except TeamNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=['get'])
    def members(self, request, pk=None):
        """Get all members of the team."""
        try:
            memberships = get_team_members(team_id=pk)
        except TeamNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        serializer = TeamMemberSerializer(memberships, many=True)
        return Response(serializer.data)

    @extend_schema(request=AddTeamPlayerSerializer, responses={201: TeamMemberSerializer})
    @action(detail=True, methods=['post', 'delete'], url_path=rf'players/(?P<player_id>{UUID_PATTERN})')
    def player(self, request, pk=None, player_id=None):
        """Add a player to the team (POST) or remove them (DELETE)."""
        logger = get_request_logger(request)

        if request.method == 'DELETE':
            try:
                remove_player_from_team(team_id=pk, player_id=player_id, logger=logger)
            except (TeamNotFoundError, NotOnTeamError) as e:
                return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
            return Response(status=status.HTTP_204_NO_CONTENT)

        serializer = AddTeamPlayerSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            membership = add_player_to_team(
                team_id=pk,
                player_id=player_id,
                joined_date=serializer.validated_data.get('joined_date'),
                logger=logger,
            )
        except (TeamNotFoundError, PlayerNotFoundError) as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except AlreadyOnTeamError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

        return Response(TeamMemberSerializer(membership).data, status=status.HTTP_201_CREATED)
