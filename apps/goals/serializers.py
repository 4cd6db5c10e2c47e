from decimal import Decimal

from django.utils import timezone
from rest_framework import serializers

from apps.accounts.serializers import UserBriefSerializer
from .models import GoalContribution, GoalPriority, SavingsGoal
from .services import MAX_AMOUNT


def money_field(**kwargs):
    return serializers.DecimalField(
        max_digits=8,
        decimal_places=2,
        min_value=Decimal('0.01'),
        max_value=MAX_AMOUNT,
        **kwargs
    )


class SavingsGoalSerializer(serializers.ModelSerializer):
    """Savings goal with computed progress."""

    progress_percentage = serializers.DecimalField(max_digits=None, decimal_places=2, read_only=True)
    remaining_amount = serializers.DecimalField(max_digits=10, decimal_places=2, read_only=True)

    class Meta:
        model = SavingsGoal
        fields = [
            'id',
            'name',
            'description',
            'target_amount',
            'current_amount',
            'remaining_amount',
            'progress_percentage',
            'target_date',
            'priority',
            'icon',
            'color',
            'is_completed',
            'owner',
            'couple',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class GoalWriteSerializer(serializers.Serializer):
    """Input for creating or updating a savings goal."""

    name = serializers.CharField(max_length=100)
    description = serializers.CharField(max_length=500, required=False, allow_blank=True)
    target_amount = money_field()
    target_date = serializers.DateField(required=False, allow_null=True)
    priority = serializers.ChoiceField(choices=GoalPriority.choices, required=False)
    icon = serializers.CharField(max_length=50, required=False, allow_blank=True)
    color = serializers.CharField(max_length=7, required=False, allow_blank=True)

    def validate_target_date(self, value):
        if value is not None and value <= timezone.localdate():
            raise serializers.ValidationError('Target date must be in the future')
        return value


class GoalCreateSerializer(GoalWriteSerializer):
    current_amount = serializers.DecimalField(
        max_digits=8,
        decimal_places=2,
        min_value=Decimal('0.00'),
        max_value=MAX_AMOUNT,
        required=False,
    )


class ContributionCreateSerializer(serializers.Serializer):
    amount = money_field()
    notes = serializers.CharField(max_length=500, required=False, allow_blank=True)
    date = serializers.DateField(required=False)


class GoalContributionSerializer(serializers.ModelSerializer):
    user = UserBriefSerializer(read_only=True)

    class Meta:
        model = GoalContribution
        fields = ['id', 'amount', 'notes', 'date', 'user', 'created_at']
        read_only_fields = fields
