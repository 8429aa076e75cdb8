from rest_framework import viewsets, mixins, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.accounts.permissions import IsClubAdmin
from config.middleware import get_request_logger

from .models import Contribution, Expense
from .permissions import CanViewPlayerAccount
from .serializers import (
    ContributionSerializer,
    ExpenseSerializer,
    PlayerAccountSerializer,
    TeamFinancialsSerializer,
    OrganizationSummarySerializer,
    ClubSummarySerializer,
    ErrorSerializer,
)
from .services import (
    AccountAggregator,
    create_contribution,
    delete_contribution,
    create_expense,
    delete_expense,
    # Exceptions
    PlayerNotFoundError,
    TeamNotFoundError,
    ContributionNotFoundError,
    ExpenseNotFoundError,
)

UUID_PATTERN = r'[0-9a-fA-F-]{32,36}'


class LedgerPagination(PageNumberPagination):
    """Custom pagination for ledger entries."""
    page_size = 50
    page_size_query_param = 'page_size'
    max_page_size = 200


class LedgerViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.CreateModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    """Ledger entries are recorded and deleted, never edited."""

    permission_classes = [IsAuthenticated]
    pagination_class = LedgerPagination
    lookup_value_regex = UUID_PATTERN

    def get_permissions(self):
        """Writes are restricted to club admins."""
        if self.action in ['create', 'destroy']:
            return [IsAuthenticated(), IsClubAdmin()]
        return [IsAuthenticated()]


class ContributionViewSet(LedgerViewSet):
    """
    ViewSet for contributions.

    list: All contributions, newest first (filter by ?player=)
    create: Record a contribution (admin only)
    retrieve: Get a contribution
    destroy: Delete a contribution (admin only)
    """

    serializer_class = ContributionSerializer

    def get_queryset(self):
        queryset = Contribution.objects.select_related('player').order_by('-date', '-created_at')
        player_id = self.request.query_params.get('player')
        if player_id:
            queryset = queryset.filter(player_id=player_id)
        return queryset

    @extend_schema(
        parameters=[OpenApiParameter('player', OpenApiTypes.UUID, description='Only this player')],
    )
    def list(self, request, *args, **kwargs):
        return super().list(request, *args, **kwargs)

    def create(self, request, *args, **kwargs):
        """Record a contribution."""
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            contribution = create_contribution(
                **serializer.validated_data,
                logger=get_request_logger(request),
            )
        except PlayerNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(ContributionSerializer(contribution).data, status=status.HTTP_201_CREATED)

    def destroy(self, request, *args, **kwargs):
        """Delete a contribution."""
        try:
            delete_contribution(contribution_id=kwargs['pk'], logger=get_request_logger(request))
        except ContributionNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)


class ExpenseViewSet(LedgerViewSet):
    """
    ViewSet for club-wide expenses.

    list: All expenses, newest first
    create: Record an expense (admin only)
    retrieve: Get an expense
    destroy: Delete an expense (admin only)
    """

    serializer_class = ExpenseSerializer
    queryset = Expense.objects.order_by('-date', '-created_at')

    def create(self, request, *args, **kwargs):
        """Record an expense."""
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        expense = create_expense(**serializer.validated_data, logger=get_request_logger(request))
        return Response(ExpenseSerializer(expense).data, status=status.HTTP_201_CREATED)

    def destroy(self, request, *args, **kwargs):
        """Delete an expense."""
        try:
            delete_expense(expense_id=kwargs['pk'], logger=get_request_logger(request))
        except ExpenseNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(
    responses={
        200: PlayerAccountSerializer,
        403: ErrorSerializer,
        404: ErrorSerializer,
    },
    description="Player account: balance, contributions and match expenses.",
    tags=['finances'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, CanViewPlayerAccount])
def player_account(request, player_id):
    """Get a player's account - thin HTTP handler."""
    try:
        account = AccountAggregator.player_account(player_id)
    except PlayerNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    return Response(PlayerAccountSerializer(account).data)


@extend_schema(
    responses={
        200: TeamFinancialsSerializer,
        403: ErrorSerializer,
        404: ErrorSerializer,
    },
    description="Team contributions, expenses (general expenses prorated by team size) and balance.",
    tags=['finances'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsClubAdmin])
def team_financials(request, team_id):
    """Get a team's financial position."""
    try:
        data = AccountAggregator.team_financials(team_id)
    except TeamNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    return Response(TeamFinancialsSerializer(data).data)


@extend_schema(
    responses={
        200: OrganizationSummarySerializer,
        403: ErrorSerializer,
    },
    description="Admin dashboard: financial breakdown of the teams the admin manages.",
    tags=['finances'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsClubAdmin])
def dashboard(request):
    """Summary of the teams managed by the admin's linked player."""
    data = AccountAggregator.organization_summary(request.user.player_id)
    return Response(OrganizationSummarySerializer(data).data)


@extend_schema(
    responses={200: ClubSummarySerializer},
    description="Club-wide contributions, expenses, balance and player count.",
    tags=['finances'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def summary(request):
    """Club-wide summary."""
    return Response(ClubSummarySerializer(AccountAggregator.club_summary()).data)
