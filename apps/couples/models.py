# ==========================================
# apps/couples/models.py
# ==========================================

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.utils import timezone
import uuid

MAX_COUPLE_MEMBERS = 2


class SplitMethod(models.TextChoices):
    EQUAL = 'equal', 'Equal'
    PROPORTIONAL = 'proportional', 'Proportional to income'
    CUSTOM = 'custom', 'Custom'


class BudgetCycle(models.TextChoices):
    WEEKLY = 'weekly', 'Weekly'
    MONTHLY = 'monthly', 'Monthly'
    QUARTERLY = 'quarterly', 'Quarterly'
    YEARLY = 'yearly', 'Yearly'


class InvitationStatus(models.TextChoices):
    PENDING = 'pending', 'Pending'
    ACCEPTED = 'accepted', 'Accepted'
    REVOKED = 'revoked', 'Revoked'


class CoupleProfile(models.Model):
    """Shared profile joined by the (at most two) members of a couple."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=150)
    currency = models.CharField(max_length=3, default='EUR')
    timezone = models.CharField(max_length=64, default='Europe/Madrid')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'couple_profiles'
        ordering = ['-created_at']

    def __str__(self):
        return self.name

    def member_count(self):
        return self.members.count()

    def is_full(self):
        return self.member_count() >= MAX_COUPLE_MEMBERS

    def has_member(self, user):
        return self.members.filter(pk=user.pk).exists()


class SharedSettings(models.Model):
    """Settings shared by both members; always exists alongside its profile."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    couple = models.OneToOneField(CoupleProfile, on_delete=models.CASCADE, related_name='shared_settings')
    split_method = models.CharField(max_length=20, choices=SplitMethod.choices, default=SplitMethod.EQUAL)
    default_currency = models.CharField(max_length=3, default='EUR')
    budget_cycle = models.CharField(max_length=20, choices=BudgetCycle.choices, default=BudgetCycle.MONTHLY)
    budget_start_day = models.PositiveSmallIntegerField(
        default=1,
        validators=[MinValueValidator(1), MaxValueValidator(31)],
    )
    shared_goal_notifications = models.BooleanField(default=True)
    large_expense_threshold = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'shared_settings'
        verbose_name_plural = 'shared settings'

    def __str__(self):
        return f"Shared settings for {self.couple.name}"


class CoupleInvitation(models.Model):
    """Time-limited link inviting a partner into a couple."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    couple = models.ForeignKey(CoupleProfile, on_delete=models.CASCADE, related_name='invitations')
    invited_by = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='sent_invitations')
    partner_email = models.EmailField(max_length=254)
    message = models.TextField(blank=True, max_length=500)
    token = models.CharField(max_length=64, unique=True, db_index=True, editable=False)
    status = models.CharField(max_length=20, choices=InvitationStatus.choices, default=InvitationStatus.PENDING)
    expires_at = models.DateTimeField()
    accepted_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='accepted_invitations',
    )
    accepted_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'couple_invitations'
        indexes = [
            models.Index(fields=['couple', 'status', 'expires_at'], name='invitation_lookup_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"Invitation to {self.partner_email} ({self.status})"

    def is_expired(self):
        return self.expires_at <= timezone.now()

    def is_usable(self):
        return self.status == InvitationStatus.PENDING and not self.is_expired()
