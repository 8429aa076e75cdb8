from django.contrib import admin
from .models import Team, TeamMembership


class TeamMembershipInline(admin.TabularInline):
    model = TeamMembership
    extra = 0
    raw_id_fields = ['player']


@admin.register(Team)
class TeamAdmin(admin.ModelAdmin):
    """Admin interface for teams."""

    list_display = ['name', 'manager', 'date_formed', 'created_at']
    search_fields = ['name', 'manager__first_name', 'manager__last_name']
    raw_id_fields = ['manager']
    readonly_fields = ['id', 'created_at', 'updated_at']
    inlines = [TeamMembershipInline]


@admin.register(TeamMembership)
class TeamMembershipAdmin(admin.ModelAdmin):
    list_display = ['player', 'team', 'joined_date']
    list_filter = ['joined_date']
    raw_id_fields = ['team', 'player']
