from decimal import Decimal
from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone
import uuid


class GoalPriority(models.TextChoices):
    LOW = 'low', 'Low'
    MEDIUM = 'medium', 'Medium'
    HIGH = 'high', 'High'


class SavingsGoal(models.Model):
    """Savings target shared by a couple, or personal when the owner has no couple."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    owner = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='savings_goals')
    couple = models.ForeignKey(
        'couples.CoupleProfile',
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='savings_goals',
    )
    name = models.CharField(max_length=100)
    description = models.TextField(blank=True, max_length=500)
    target_amount = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))],
    )
    current_amount = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal('0.00'))
    target_date = models.DateField(null=True, blank=True)
    priority = models.CharField(max_length=10, choices=GoalPriority.choices, default=GoalPriority.MEDIUM)
    icon = models.CharField(max_length=50, blank=True)
    color = models.CharField(max_length=7, blank=True)
    is_completed = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'savings_goals'
        indexes = [
            models.Index(fields=['couple', 'created_at'], name='goal_couple_created_idx'),
            models.Index(fields=['owner', 'created_at'], name='goal_owner_created_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return self.name

    @property
    def progress_percentage(self):
        if not self.target_amount:
            return Decimal('0.00')
        percentage = self.current_amount / self.target_amount * 100
        return percentage.quantize(Decimal('0.01'))

    @property
    def remaining_amount(self):
        return max(self.target_amount - self.current_amount, Decimal('0.00'))


class GoalContribution(models.Model):
    """Money added to a savings goal by one of its members."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    goal = models.ForeignKey(SavingsGoal, on_delete=models.CASCADE, related_name='contributions')
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='goal_contributions')
    amount = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))],
    )
    notes = models.TextField(blank=True, max_length=500)
    date = models.DateField(default=timezone.localdate)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'goal_contributions'
        ordering = ['-date', '-created_at']

    def __str__(self):
        return f"{self.amount} to {self.goal.name}"
