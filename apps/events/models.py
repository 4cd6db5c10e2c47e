from django.db import models
import uuid


class EventKind(models.TextChoices):
    INCOME = 'income', 'Income'
    EXPENSE = 'expense', 'Expense'
    REMINDER = 'reminder', 'Reminder'
    GOAL = 'goal', 'Goal'


class CalendarEvent(models.Model):
    """Dated entry on the finance calendar."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    owner = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='calendar_events')
    couple = models.ForeignKey(
        'couples.CoupleProfile',
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='calendar_events',
    )
    title = models.CharField(max_length=200)
    kind = models.CharField(max_length=10, choices=EventKind.choices)
    amount = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    date = models.DateField()
    description = models.TextField(blank=True, max_length=500)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'calendar_events'
        indexes = [
            models.Index(fields=['couple', 'date'], name='event_couple_date_idx'),
            models.Index(fields=['owner', 'date'], name='event_owner_date_idx'),
        ]
        ordering = ['date', 'created_at']

    def __str__(self):
        return f"{self.date} {self.title}"
