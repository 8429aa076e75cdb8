from django.contrib import admin
from .models import Match, MatchParticipation


class MatchParticipationInline(admin.TabularInline):
    model = MatchParticipation
    extra = 0
    raw_id_fields = ['player']
    readonly_fields = ['expense_share']


@admin.register(Match)
class MatchAdmin(admin.ModelAdmin):
    """
    Admin interface for matches.

    Derived totals are read-only; roster edits here do not re-split shares,
    use the API for that.
    """

    list_display = [
        'match_date',
        'team',
        'opponent_team',
        'venue',
        'total_expense',
        'players_count',
        'paying_players_count',
    ]
    list_filter = ['match_date', 'team']
    search_fields = ['opponent_team', 'venue', 'team__name']
    date_hierarchy = 'match_date'
    readonly_fields = [
        'id',
        'total_expense',
        'players_count',
        'paying_players_count',
        'expense_per_player',
        'created_at',
        'updated_at',
    ]
    inlines = [MatchParticipationInline]
