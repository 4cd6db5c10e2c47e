"""
Serializers for the dashboard app.

Input Serializers:
    DashboardQuerySerializer - Validates the period parameter

Response Serializers:
    DashboardResponseSerializer - Full dashboard payload
"""

from rest_framework import serializers

from apps.events.serializers import CalendarEventSerializer


class DashboardQuerySerializer(serializers.Serializer):
    """Period for the income/expense summary (week, month, quarter, year)."""

    period = serializers.CharField(required=False, default='month')


class PeriodSerializer(serializers.Serializer):
    name = serializers.CharField()
    start = serializers.DateField()
    end = serializers.DateField()


class SummarySerializer(serializers.Serializer):
    total_income = serializers.DecimalField(max_digits=12, decimal_places=2)
    total_expenses = serializers.DecimalField(max_digits=12, decimal_places=2)
    net_balance = serializers.DecimalField(max_digits=12, decimal_places=2)
    events_count = serializers.IntegerField()
    savings_rate = serializers.DecimalField(max_digits=None, decimal_places=2)


class MonthlyTrendSerializer(serializers.Serializer):
    month = serializers.CharField()
    income = serializers.DecimalField(max_digits=12, decimal_places=2)
    expenses = serializers.DecimalField(max_digits=12, decimal_places=2)
    net_balance = serializers.DecimalField(max_digits=12, decimal_places=2)


class ActiveGoalSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    name = serializers.CharField()
    target_amount = serializers.DecimalField(max_digits=10, decimal_places=2)
    current_amount = serializers.DecimalField(max_digits=10, decimal_places=2)
    progress_percentage = serializers.DecimalField(max_digits=None, decimal_places=2)
    period_contributions = serializers.DecimalField(max_digits=12, decimal_places=2)
    target_date = serializers.DateField(allow_null=True)


class GoalProgressSerializer(serializers.Serializer):
    total_goals = serializers.IntegerField()
    completed_goals = serializers.IntegerField()
    total_target = serializers.DecimalField(max_digits=12, decimal_places=2)
    total_saved = serializers.DecimalField(max_digits=12, decimal_places=2)
    overall_progress = serializers.DecimalField(max_digits=None, decimal_places=2)
    active = ActiveGoalSerializer(many=True)


class CategoryCountSerializer(serializers.Serializer):
    income = serializers.IntegerField()
    expense = serializers.IntegerField()


class DashboardResponseSerializer(serializers.Serializer):
    period = PeriodSerializer()
    summary = SummarySerializer()
    monthly_trends = MonthlyTrendSerializer(many=True)
    upcoming_events = CalendarEventSerializer(many=True)
    goals = GoalProgressSerializer()
    categories = CategoryCountSerializer()


class ErrorSerializer(serializers.Serializer):
    error = serializers.CharField()
