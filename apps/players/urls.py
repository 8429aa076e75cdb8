from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'players'

router = DefaultRouter()
router.register(r'', views.PlayerViewSet, basename='player')

urlpatterns = [
    # GET    /api/players/              - List players
    # POST   /api/players/              - Create player (admin)
    # GET    /api/players/{id}/         - Get player
    # PUT    /api/players/{id}/         - Update player (admin)
    # PATCH  /api/players/{id}/         - Partial update (admin)
    # DELETE /api/players/{id}/         - Delete player (admin)
    # GET    /api/players/{id}/teams/   - Teams of the player
    path('', include(router.urls)),
]
