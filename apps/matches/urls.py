from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'matches'

router = DefaultRouter()
router.register(r'', views.MatchViewSet, basename='match')

urlpatterns = [
    # GET    /api/matches/                                           - List matches
    # POST   /api/matches/                                           - Create match with roster (admin)
    # GET    /api/matches/{id}/                                      - Match with participants
    # PUT    /api/matches/{id}/                                      - Edit details and costs (admin)
    # PATCH  /api/matches/{id}/                                      - Partial edit (admin)
    # DELETE /api/matches/{id}/                                      - Delete match (admin)
    # POST   /api/matches/{id}/players/{player_id}/                  - Add player (admin)
    # DELETE /api/matches/{id}/players/{player_id}/                  - Remove player (admin)
    # PUT    /api/matches/{id}/players/{player_id}/paying-status/    - Toggle paying (admin)
    path('', include(router.urls)),
]
