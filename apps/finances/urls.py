from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'finances'

router = DefaultRouter()
router.register(r'contributions', views.ContributionViewSet, basename='contribution')
router.register(r'expenses', views.ExpenseViewSet, basename='expense')

urlpatterns = [
    # Ledger ViewSet routes
    # GET    /api/finances/contributions/        - List contributions
    # POST   /api/finances/contributions/        - Record contribution (admin)
    # GET    /api/finances/contributions/{id}/   - Get contribution
    # DELETE /api/finances/contributions/{id}/   - Delete contribution (admin)
    # (same for /api/finances/expenses/)

    # Aggregates
    path('players/<uuid:player_id>/account/', views.player_account, name='player-account'),
    path('teams/<uuid:team_id>/', views.team_financials, name='team-financials'),
    path('dashboard/', views.dashboard, name='dashboard'),
    path('summary/', views.summary, name='summary'),

    path('', include(router.urls)),
]
