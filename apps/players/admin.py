from django.contrib import admin
from .models import Player


@admin.register(Player)
class PlayerAdmin(admin.ModelAdmin):
    """Admin interface for players."""

    list_display = ['full_name', 'mobile_number', 'email', 'birthday', 'created_at']
    search_fields = ['first_name', 'last_name', 'email', 'mobile_number']
    ordering = ['last_name', 'first_name']
    readonly_fields = ['id', 'created_at', 'updated_at']
