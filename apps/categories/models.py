from django.core.validators import RegexValidator
from django.db import models
from django.db.models import Q
import uuid

hex_color_validator = RegexValidator(
    regex=r'^#[0-9A-Fa-f]{6}$',
    message='Color must be a hexadecimal value like #10B981',
)


class CategoryKind(models.TextChoices):
    INCOME = 'income', 'Income'
    EXPENSE = 'expense', 'Expense'


class ScopeKind(models.TextChoices):
    PERSONAL = 'personal', 'Personal'
    SHARED = 'shared', 'Shared'


class Category(models.Model):
    """Income or expense label, owned by an account in a personal or shared scope."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    owner = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='categories')
    scope = models.CharField(max_length=10, choices=ScopeKind.choices, default=ScopeKind.PERSONAL)
    couple = models.ForeignKey(
        'couples.CoupleProfile',
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='categories',
    )
    name = models.CharField(max_length=100)
    icon = models.CharField(max_length=50)
    color = models.CharField(max_length=7, validators=[hex_color_validator])
    kind = models.CharField(max_length=10, choices=CategoryKind.choices)
    is_default = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'categories'
        verbose_name_plural = 'categories'
        constraints = [
            models.CheckConstraint(
                condition=(
                    Q(scope=ScopeKind.SHARED, couple__isnull=False)
                    | Q(scope=ScopeKind.PERSONAL, couple__isnull=True)
                ),
                name='category_scope_matches_couple',
            ),
        ]
        indexes = [
            models.Index(fields=['couple', 'kind'], name='category_couple_kind_idx'),
            models.Index(fields=['owner', 'scope'], name='category_owner_scope_idx'),
        ]
        ordering = ['-is_default', 'name']

    def __str__(self):
        return f"{self.name} ({self.kind})"

    @property
    def scope_id(self):
        """Identifier of the owning scope: the couple when shared, else the owner."""
        if self.scope == ScopeKind.SHARED:
            return self.couple_id
        return self.owner_id
