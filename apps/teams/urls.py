from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'teams'

router = DefaultRouter()
router.register(r'', views.TeamViewSet, basename='team')

urlpatterns = [
    # GET    /api/teams/                          - List teams
    # POST   /api/teams/                          - Create team (admin)
    # GET    /api/teams/{id}/                     - Get team
    # PUT    /api/teams/{id}/                     - Update team (admin)
    # PATCH  /api/teams/{id}/                     - Partial update (admin)
    # DELETE /api/teams/{id}/                     - Delete team (admin)
    # GET    /api/teams/{id}/members/             - Team members
    # POST   /api/teams/{id}/players/{player_id}/ - Add player (admin)
    # DELETE /api/teams/{id}/players/{player_id}/ - Remove player (admin)
    path('', include(router.urls)),
]
