from django.contrib import admin
from .models import GoalContribution, SavingsGoal


class GoalContributionInline(admin.TabularInline):
    model = GoalContribution
    extra = 0
    raw_id_fields = ['user']
    readonly_fields = ['created_at']


@admin.register(SavingsGoal)
class SavingsGoalAdmin(admin.ModelAdmin):
    list_display = [
        'name',
        'couple',
        'owner',
        'current_amount',
        'target_amount',
        'priority',
        'is_completed',
        'target_date',
    ]
    list_filter = ['priority', 'is_completed']
    search_fields = ['name', 'owner__email', 'couple__name']
    raw_id_fields = ['owner', 'couple']
    readonly_fields = ['created_at', 'updated_at']
    inlines = [GoalContributionInline]
