from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.accounts.permissions import IsClubAdmin
from config.middleware import get_request_logger

from .serializers import (
    MatchSerializer,
    MatchListSerializer,
    MatchCreateSerializer,
    MatchUpdateSerializer,
    MatchParticipationSerializer,
    AddMatchPlayerSerializer,
    PayingStatusSerializer,
)
from .services import (
    create_match,
    update_match,
    delete_match,
    get_match,
    list_matches,
    add_player_to_match,
    remove_player_from_match,
    set_paying_status,
    # Exceptions
    MatchNotFoundError,
    PlayerNotFoundError,
    TeamNotFoundError,
    ParticipationNotFoundError,
    InvalidRosterError,
    AlreadyInMatchError,
)

UUID_PATTERN = r'[0-9a-fA-F-]{32,36}'

NOT_FOUND_ERRORS = (
    MatchNotFoundError,
    PlayerNotFoundError,
    TeamNotFoundError,
    ParticipationNotFoundError,
)


class MatchPagination(PageNumberPagination):
    """Custom pagination for matches."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class MatchViewSet(viewsets.ModelViewSet):
    """
    ViewSet for matches and their rosters.

    All business logic is handled by services.
    Views are thin HTTP handlers only.

    list: Get matches, newest first (filter by ?team= or ?player=)
    create: Create a match with its roster (admin only)
    retrieve: Get a match with participants and shares
    update: Edit details and costs (admin only)
    partial_update: Partially edit (admin only)
    destroy: Delete a match (admin only)
    """

    permission_classes = [IsAuthenticated]
    pagination_class = MatchPagination
    lookup_value_regex = UUID_PATTERN

    def get_queryset(self):
        return list_matches(
            team_id=self.request.query_params.get('team') or None,
            player_id=self.request.query_params.get('player') or None,
        )

    def get_serializer_class(self):
        """Use different serializers for different actions."""
        if self.action == 'list':
            return MatchListSerializer
        elif self.action == 'create':
            return MatchCreateSerializer
        elif self.action in ['update', 'partial_update']:
            return MatchUpdateSerializer
        return MatchSerializer

    def get_permissions(self):
        """Writes and roster changes are restricted to club admins."""
        if self.action in ['list', 'retrieve']:
            return [IsAuthenticated()]
        return [IsAuthenticated(), IsClubAdmin()]

    def _match_response(self, match_id, status_code=status.HTTP_200_OK):
        match = get_match(match_id=match_id)
        return Response(MatchSerializer(match).data, status=status_code)

    @extend_schema(
        parameters=[
            OpenApiParameter('team', OpenApiTypes.UUID, description='Only matches of this team'),
            OpenApiParameter('player', OpenApiTypes.UUID, description='Only matches this player took part in'),
        ],
    )
    def list(self, request, *args, **kwargs):
        return super().list(request, *args, **kwargs)

    def retrieve(self, request, *args, **kwargs):
        try:
            return self._match_response(kwargs['pk'])
        except MatchNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    @extend_schema(request=MatchCreateSerializer, responses={201: MatchSerializer})
    def create(self, request, *args, **kwargs):
        """Create a match and split its cost across the paying roster."""
        serializer = MatchCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            match = create_match(**serializer.validated_data, logger=get_request_logger(request))
        except InvalidRosterError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
        except NOT_FOUND_ERRORS as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return self._match_response(match.id, status.HTTP_201_CREATED)

    @extend_schema(request=MatchUpdateSerializer, responses={200: MatchSerializer})
    def update(self, request, *args, **kwargs):
        """Edit match details; cost changes re-split the total."""
        partial = kwargs.pop('partial', False)
        serializer = MatchUpdateSerializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            update_match(
                match_id=kwargs['pk'],
                logger=get_request_logger(request),
                **serializer.validated_data,
            )
            return self._match_response(kwargs['pk'])
        except NOT_FOUND_ERRORS as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    def destroy(self, request, *args, **kwargs):
        """Delete a match."""
        try:
            delete_match(match_id=kwargs['pk'], logger=get_request_logger(request))
        except MatchNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(request=AddMatchPlayerSerializer, responses={201: MatchParticipationSerializer})
    @action(detail=True, methods=['post', 'delete'], url_path=rf'players/(?P<player_id>{UUID_PATTERN})')
    def player(self, request, pk=None, player_id=None):
        """Add a player to the match (POST) or remove them (DELETE)."""
        logger = get_request_logger(request)

        if request.method == 'DELETE':
            try:
                remove_player_from_match(match_id=pk, player_id=player_id, logger=logger)
            except InvalidRosterError as e:
                return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
            except NOT_FOUND_ERRORS as e:
                return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
            return self._match_response(pk)

        serializer = AddMatchPlayerSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            participation = add_player_to_match(
                match_id=pk,
                player_id=player_id,
                is_paying=serializer.validated_data['is_paying'],
                logger=logger,
            )
        except AlreadyInMatchError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)
        except NOT_FOUND_ERRORS as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(
            MatchParticipationSerializer(participation).data,
            status=status.HTTP_201_CREATED,
        )

    @extend_schema(request=PayingStatusSerializer, responses={200: MatchSerializer})
    @action(
        detail=True,
        methods=['put'],
        url_path=rf'players/(?P<player_id>{UUID_PATTERN})/paying-status',
        url_name='paying-status',
    )
    def paying_status(self, request, pk=None, player_id=None):
        """Toggle whether a participant pays."""
        serializer = PayingStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            set_paying_status(
                match_id=pk,
                player_id=player_id,
                is_paying=serializer.validated_data['is_paying'],
                logger=get_request_logger(request),
            )
        except InvalidRosterError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
        except NOT_FOUND_ERRORS as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return self._match_response(pk)
