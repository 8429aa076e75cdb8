from django.contrib import admin
from .models import Contribution, Expense


@admin.register(Contribution)
class ContributionAdmin(admin.ModelAdmin):
    list_display = ['player', 'amount', 'date', 'description']
    list_filter = ['date']
    search_fields = ['player__first_name', 'player__last_name', 'description']
    raw_id_fields = ['player']
    date_hierarchy = 'date'


@admin.register(Expense)
class ExpenseAdmin(admin.ModelAdmin):
    list_display = ['description', 'category', 'amount', 'date']
    list_filter = ['category', 'date']
    search_fields = ['description', 'category']
    date_hierarchy = 'date'
